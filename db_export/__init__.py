"""
MySQL Database Export
=====================
Exports and imports a MySQL database through the mysqldump and mysql
command line clients, either into a package's content directory or an
explicit .sql file, as content tables only or as a full dump.
"""

from .commands import DbCommands, format_table_list, get_filename_for_dump
from .config import ConfigLoader
from .exceptions import (
    ConfigurationError,
    DbExportError,
    DumpFileError,
    InvalidModeError,
    PackageNotActiveError,
    ProcessExecutionError,
    SqlFileNotFoundError,
    UnknownPackageError,
    UsageError,
)
from .main import main
from .models import CommandSettings, ConnectionSettings, DumpMode, PackageInfo
from .packages import PackageRegistry, get_content_directory, strip_root_path
from .process import mask_command, run_command
from .utils import bytes_to_size_string, setup_logging

__version__ = "1.0.0"

__all__ = [
    # Main entry point
    "main",
    # Core classes
    "ConfigLoader",
    "DbCommands",
    "PackageRegistry",
    # Models
    "CommandSettings",
    "ConnectionSettings",
    "DumpMode",
    "PackageInfo",
    # Errors
    "ConfigurationError",
    "DbExportError",
    "DumpFileError",
    "InvalidModeError",
    "PackageNotActiveError",
    "ProcessExecutionError",
    "SqlFileNotFoundError",
    "UnknownPackageError",
    "UsageError",
    # Utilities
    "bytes_to_size_string",
    "format_table_list",
    "get_content_directory",
    "get_filename_for_dump",
    "mask_command",
    "run_command",
    "setup_logging",
    "strip_root_path",
]
