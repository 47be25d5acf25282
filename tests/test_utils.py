"""
Unit tests for utils.py
"""

import logging
import tempfile
from pathlib import Path

import pytest

from db_export.utils import bytes_to_size_string, setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""

    @pytest.fixture(autouse=True)
    def reset_logging(self):
        """Reset logging configuration before each test."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
        root_logger.setLevel(logging.NOTSET)
        yield
        for handler in root_logger.handlers[:]:
            if type(handler) in (logging.StreamHandler, logging.FileHandler):
                handler.close()
                root_logger.removeHandler(handler)

    def test_default_log_level(self):
        """Test default log level is INFO."""
        setup_logging({})
        assert logging.getLogger().level == logging.INFO

    def test_custom_log_level(self):
        """Test setting custom log level."""
        setup_logging({"level": "DEBUG"})
        assert logging.getLogger().level == logging.DEBUG

    def test_log_level_case_insensitive(self):
        """Test log level is case insensitive."""
        setup_logging({"level": "warning"})
        assert logging.getLogger().level == logging.WARNING

    def test_creates_log_directory(self):
        """Test that log directory is created if it doesn't exist."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / "nested" / "dir" / "db-export.log"
            setup_logging({"file": str(log_file)})

            logging.info("Test message")

            assert log_file.parent.exists()
            assert log_file.exists()

            for handler in logging.getLogger().handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    handler.close()
                    logging.getLogger().removeHandler(handler)


class TestBytesToSizeString:
    """Tests for bytes_to_size_string function."""

    def test_bytes(self):
        """Test sizes below one kilobyte."""
        assert bytes_to_size_string(0) == "0 B"
        assert bytes_to_size_string(512) == "512 B"
        assert bytes_to_size_string(1023) == "1023 B"

    def test_kilobytes(self):
        """Test kilobyte sizes."""
        assert bytes_to_size_string(1024) == "1.0 KB"
        assert bytes_to_size_string(1536) == "1.5 KB"

    def test_megabytes(self):
        """Test megabyte sizes."""
        assert bytes_to_size_string(5 * 1024 * 1024) == "5.0 MB"

    def test_decimals(self):
        """Test custom precision."""
        assert bytes_to_size_string(1300, decimals=2) == "1.27 KB"

    def test_negative_is_zero(self):
        """Test negative sizes are clamped."""
        assert bytes_to_size_string(-10) == "0 B"
