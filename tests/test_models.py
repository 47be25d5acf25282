"""
Unit tests for models.py
"""

import os

import pytest

from db_export.exceptions import ConfigurationError, InvalidModeError
from db_export.models import CommandSettings, ConnectionSettings, DumpMode, PackageInfo


class TestDumpMode:
    """Tests for DumpMode enum."""

    def test_values(self):
        """Test enum values."""
        assert DumpMode.CONTENT.value == "content"
        assert DumpMode.ALL.value == "all"

    def test_from_string(self):
        """Test resolving modes from strings."""
        assert DumpMode.from_value("content") is DumpMode.CONTENT
        assert DumpMode.from_value("all") is DumpMode.ALL

    def test_from_enum(self):
        """Test enum members pass through unchanged."""
        assert DumpMode.from_value(DumpMode.ALL) is DumpMode.ALL

    @pytest.mark.parametrize("value", ["", "CONTENT", "full", None, 1])
    def test_invalid_mode(self, value):
        """Test unknown modes raise InvalidModeError."""
        with pytest.raises(InvalidModeError) as exc_info:
            DumpMode.from_value(value)
        assert str(exc_info.value) == "Invalid mode selected."


class TestConnectionSettings:
    """Tests for ConnectionSettings dataclass."""

    def test_defaults(self):
        """Test default values."""
        settings = ConnectionSettings(dbname="app")
        assert settings.host == "127.0.0.1"
        assert settings.user == "root"
        assert settings.password == ""
        assert settings.port == 3306

    def test_from_config(self):
        """Test building settings from a config section."""
        settings = ConnectionSettings.from_config({
            "host": "db.example.com",
            "user": "admin",
            "password": "secret",
            "port": "3307",
            "dbname": "production"
        })
        assert settings.host == "db.example.com"
        assert settings.user == "admin"
        assert settings.password == "secret"
        assert settings.port == 3307
        assert settings.dbname == "production"

    def test_from_config_fills_defaults(self):
        """Test missing and empty keys fall back to defaults."""
        settings = ConnectionSettings.from_config({
            "dbname": "app",
            "host": None,
            "password": None,
            "port": ""
        })
        assert settings == ConnectionSettings(dbname="app")

    def test_missing_dbname(self):
        """Test that dbname is required."""
        with pytest.raises(ConfigurationError):
            ConnectionSettings.from_config({"host": "localhost"})

    def test_invalid_port(self):
        """Test non-numeric port is rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConnectionSettings.from_config({"dbname": "app", "port": "abc"})
        assert "port" in str(exc_info.value)


class TestPackageInfo:
    """Tests for PackageInfo dataclass."""

    def test_resources_path(self):
        """Test resources path is below the package path."""
        package = PackageInfo(key="Acme.Demo", path="Packages/Sites/Acme.Demo")
        assert package.resources_path == os.path.join("Packages/Sites/Acme.Demo", "Resources")
        assert package.active is True


class TestCommandSettings:
    """Tests for CommandSettings dataclass."""

    def test_defaults(self):
        """Test default values."""
        settings = CommandSettings(connection=ConnectionSettings(dbname="app"))
        assert settings.dbname == "app"
        assert settings.content_tables == []
        assert settings.root_path == os.getcwd()
        assert settings.dump_binary == "mysqldump"
        assert settings.client_binary == "mysql"
        assert settings.output_results is True

    def test_resolve_path(self, tmp_path):
        """Test relative paths are anchored at the root path."""
        settings = CommandSettings(
            connection=ConnectionSettings(dbname="app"),
            root_path=str(tmp_path)
        )
        assert settings.resolve_path("dump.sql") == os.path.join(str(tmp_path), "dump.sql")
        assert settings.resolve_path("/tmp/dump.sql") == "/tmp/dump.sql"
