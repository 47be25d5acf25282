"""
Exceptions raised by the database export tool.

Each error carries the exit status the CLI terminates with.
"""

from typing import Optional, Sequence


class DbExportError(RuntimeError):
    """Base class for all errors raised by db_export."""

    exit_code = 1


class ConfigurationError(DbExportError):
    """Configuration is missing a required value or holds an invalid one."""


class UsageError(DbExportError):
    """Neither a package key nor an SQL file was given."""


class InvalidModeError(DbExportError):
    """Dump mode is not one of the known modes."""


class UnknownPackageError(DbExportError):
    """Package key is not known to the registry."""


class PackageNotActiveError(DbExportError):
    """Package exists but is not active."""


class SqlFileNotFoundError(DbExportError):
    """SQL file to import does not exist."""

    exit_code = 2


class ProcessExecutionError(DbExportError):
    """An external command exited with a nonzero status."""

    def __init__(self, message: str, exit_code: int, command: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.exit_code = exit_code
        self.command = list(command) if command is not None else []


class DumpFileError(DbExportError):
    """Dump file cannot be written."""
