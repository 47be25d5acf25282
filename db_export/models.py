"""
Data models and enums for the database export tool.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .exceptions import ConfigurationError, InvalidModeError


class DumpMode(Enum):
    """Table scope of a dump."""
    CONTENT = "content"
    ALL = "all"

    @classmethod
    def from_value(cls, value: Union["DumpMode", str]) -> "DumpMode":
        """Resolve a mode from its string value, raising InvalidModeError for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidModeError("Invalid mode selected.") from None


@dataclass
class ConnectionSettings:
    """Connection settings passed to the mysql/mysqldump clients."""
    dbname: str
    host: str = "127.0.0.1"
    user: str = "root"
    password: str = ""
    port: int = 3306

    @classmethod
    def from_config(cls, db_config: dict[str, Any]) -> "ConnectionSettings":
        """
        Create ConnectionSettings from the 'database' config section.

        Keys that are missing or empty fall back to the defaults, except
        'dbname' which is required.
        """
        dbname = db_config.get('dbname')
        if not dbname:
            raise ConfigurationError("Database name ('database.dbname') is not configured")

        settings: dict[str, Any] = {'dbname': str(dbname)}
        for key in ['host', 'user', 'password']:
            if db_config.get(key) is not None:
                settings[key] = str(db_config[key])

        port = db_config.get('port')
        if port not in (None, ''):
            try:
                settings['port'] = int(port)
            except (TypeError, ValueError):
                raise ConfigurationError(f"Invalid database port: {port!r}") from None

        return cls(**settings)


@dataclass
class PackageInfo:
    """A package known to the registry."""
    key: str
    path: str
    active: bool = True

    @property
    def resources_path(self) -> str:
        return os.path.join(self.path, 'Resources')


@dataclass
class CommandSettings:
    """Everything the export/import commands need from configuration."""
    connection: ConnectionSettings
    content_tables: list[str] = field(default_factory=list)
    root_path: str = field(default_factory=os.getcwd)
    dump_binary: str = "mysqldump"
    client_binary: str = "mysql"
    output_results: bool = True

    @property
    def dbname(self) -> str:
        return self.connection.dbname

    def resolve_path(self, path: str) -> str:
        """Return path anchored at root_path when it is relative."""
        if os.path.isabs(path):
            return path
        return os.path.join(self.root_path, path)
