"""
Configuration loading and validation for the database export tool.
"""

import os
import re
from typing import Any

import yaml

from .exceptions import ConfigurationError
from .models import CommandSettings, ConnectionSettings


class ConfigLoader:
    """Loads and validates configuration from YAML file."""

    ENV_VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')

    def __init__(self, config_path: str):
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from YAML file."""
        with open(self.config_path, 'r') as f:
            config = yaml.safe_load(f)

        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"Configuration file '{self.config_path}' must contain a mapping")

        return self._resolve_env_vars(config)

    def _resolve_env_vars(self, obj: Any) -> Any:
        """Recursively resolve environment variables in config."""
        if isinstance(obj, str):
            matches = self.ENV_VAR_PATTERN.findall(obj)
            for match in matches:
                env_value = os.environ.get(match, '')
                obj = obj.replace(f'${{{match}}}', env_value)
            return obj
        elif isinstance(obj, dict):
            return {k: self._resolve_env_vars(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [self._resolve_env_vars(item) for item in obj]
        return obj

    def get_database_settings(self) -> dict[str, Any]:
        """Get raw database connection settings."""
        return self.config.get('database') or {}

    def get_connection_settings(self) -> ConnectionSettings:
        """Get typed connection settings."""
        return ConnectionSettings.from_config(self.get_database_settings())

    def get_content_tables(self) -> list[str]:
        """Get the ordered list of content tables."""
        tables = self.config.get('content_tables') or []
        if not isinstance(tables, list):
            raise ConfigurationError("'content_tables' must be a list of table names")
        return [str(t) for t in tables]

    def get_packages(self) -> dict[str, Any]:
        """Get package definitions."""
        packages = self.config.get('packages') or {}
        if not isinstance(packages, dict):
            raise ConfigurationError("'packages' must map package keys to package paths")
        return packages

    def get_root_path(self) -> str:
        """
        Get the root path that package paths are anchored at.

        A relative root_path is resolved against the directory holding the
        configuration file.
        """
        root_path = self.config.get('root_path')
        if not root_path:
            return os.getcwd()
        if not os.path.isabs(root_path):
            config_dir = os.path.dirname(os.path.abspath(self.config_path))
            root_path = os.path.join(config_dir, root_path)
        return os.path.normpath(root_path)

    def get_binaries(self) -> dict[str, str]:
        """Get external binary names/paths."""
        return self.config.get('binaries') or {}

    def get_logging_settings(self) -> dict[str, Any]:
        """Get logging settings."""
        return self.config.get('logging') or {}

    def get_command_settings(self) -> CommandSettings:
        """Build the settings passed to the export/import commands."""
        binaries = self.get_binaries()
        return CommandSettings(
            connection=self.get_connection_settings(),
            content_tables=self.get_content_tables(),
            root_path=self.get_root_path(),
            dump_binary=binaries.get('mysqldump') or 'mysqldump',
            client_binary=binaries.get('mysql') or 'mysql',
        )
