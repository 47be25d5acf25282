"""
Export and import commands for the database export tool.
"""

import logging
import os
import tempfile
from typing import Optional, Union

from .exceptions import ConfigurationError, DumpFileError, SqlFileNotFoundError, UsageError
from .models import CommandSettings, DumpMode
from .packages import PackageRegistry, get_content_directory, strip_root_path
from .process import run_command
from .utils import bytes_to_size_string

USAGE_MESSAGE = 'You have to specify either "--package-key" or "--sql-file"'

DUMP_FILENAMES = {
    DumpMode.CONTENT: 'Content.sql',
    DumpMode.ALL: 'Dump.sql',
}


def get_filename_for_dump(mode: Union[DumpMode, str]) -> str:
    """Get the dump filename for a dump mode."""
    return DUMP_FILENAMES[DumpMode.from_value(mode)]


def _remove_if_exists(path: str) -> None:
    if os.path.exists(path):
        os.unlink(path)


def format_table_list(tables: list[str]) -> str:
    """Join table names with single spaces; empty string means all tables."""
    return ' '.join(tables)


class DbCommands:
    """Exports and imports the database through mysqldump and mysql."""

    def __init__(self, settings: CommandSettings, registry: PackageRegistry):
        self.settings = settings
        self.registry = registry

    def get_tables_to_export(self, mode: Union[DumpMode, str]) -> list[str]:
        """Get tables to export, or an empty list to export all tables."""
        mode = DumpMode.from_value(mode)
        if mode is DumpMode.CONTENT:
            return list(self.settings.content_tables)
        return []

    def get_connection_params(self) -> list[str]:
        """Build authentication arguments for the mysql and mysqldump programs."""
        connection = self.settings.connection
        params = [f"-h{connection.host}", f"-u{connection.user}"]
        if connection.password:
            params.append(f"-p{connection.password}")
        params.append(f"-P{connection.port}")
        return params

    def assert_root_path_exists(self) -> None:
        if not os.path.isdir(self.settings.root_path):
            raise ConfigurationError(f"Root path '{self.settings.root_path}' does not exist")

    def resolve_sql_file(
        self,
        package_key: Optional[str],
        sql_file: Optional[str],
        mode: Union[DumpMode, str],
        create_directory: bool = False
    ) -> str:
        """
        Resolve the .sql file location.

        A package key takes precedence over an explicit file. The package
        path is returned relative to the root path.
        """
        if package_key:
            directory = get_content_directory(
                self.registry, package_key, self.settings.root_path, create=create_directory
            )
            path = directory + get_filename_for_dump(mode)
            return strip_root_path(path, self.settings.root_path)
        if sql_file:
            return sql_file
        raise UsageError(USAGE_MESSAGE)

    def export(
        self,
        package_key: Optional[str] = None,
        sql_file: Optional[str] = None,
        mode: Union[DumpMode, str] = DumpMode.CONTENT
    ) -> int:
        """Export the database into a .sql file."""
        db_name = self.settings.dbname
        tables = self.get_tables_to_export(mode)
        self.assert_root_path_exists()
        sql_file = self.resolve_sql_file(package_key, sql_file, mode, create_directory=True)
        target = self.settings.resolve_path(sql_file)

        cmd = [self.settings.dump_binary, '-v', *self.get_connection_params(), db_name, *tables]
        logging.info(f"Exporting database '{db_name}' to '{target}'")

        result = self._dump_to_file(cmd, sql_file, target)

        size = os.path.getsize(target)
        tables_to_export = format_table_list(tables)

        print()
        print(f"Database '{db_name}' has been exported to '{sql_file}' file.")
        print(f"Exported {sql_file} file size: {bytes_to_size_string(size)}")
        print()
        print(f"Exported tables: {tables_to_export or '[all]'}.")
        print()
        return result

    def _dump_to_file(self, cmd: list[str], sql_file: str, target: str) -> int:
        """
        Run the dump command into a temporary file next to target.

        The temporary file replaces target only when the command succeeds.
        """
        try:
            fd, temp_path = tempfile.mkstemp(
                prefix=f".{os.path.basename(target)}.", suffix='.tmp',
                dir=os.path.dirname(target) or None
            )
        except OSError as e:
            raise DumpFileError(f"Cannot write '{sql_file}': {e.strerror}") from e

        try:
            with os.fdopen(fd, 'w') as f:
                result = run_command(
                    cmd,
                    output_results=self.settings.output_results,
                    stdout=f,
                    cwd=self.settings.root_path
                )
            os.replace(temp_path, target)
        except OSError as e:
            _remove_if_exists(temp_path)
            raise DumpFileError(f"Cannot write '{sql_file}': {e.strerror}") from e
        except BaseException:
            _remove_if_exists(temp_path)
            raise
        return result

    def import_(
        self,
        package_key: Optional[str] = None,
        sql_file: Optional[str] = None,
        mode: Union[DumpMode, str] = DumpMode.CONTENT
    ) -> int:
        """Import the database from a .sql file."""
        db_name = self.settings.dbname
        self.assert_root_path_exists()
        if package_key:
            self.registry.assert_package_is_active(package_key)
        sql_file = self.resolve_sql_file(package_key, sql_file, mode)
        source = self.settings.resolve_path(sql_file)

        if not os.path.isfile(source):
            raise SqlFileNotFoundError(f"File '{sql_file}' could not be found.")

        print()
        print(f"Importing '{sql_file}' into '{db_name}' database...")

        cmd = [
            self.settings.client_binary, *self.get_connection_params(), db_name,
            '-e', f"source {source}"
        ]
        logging.info(f"Importing '{source}' into database '{db_name}'")
        result = run_command(
            cmd,
            output_results=self.settings.output_results,
            cwd=self.settings.root_path
        )

        print("Done!")
        return result
