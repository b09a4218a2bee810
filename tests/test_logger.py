"""Tests for logger module."""
import pytest
from unittest.mock import patch
import os
from datetime import datetime

from hyprchoosy.logger import Logger, LogLevel, get_logger, init_logger


@pytest.fixture
def log_dir(tmp_path):
    """Log directory used by the autouse logger fixture."""
    return tmp_path / "log"


@pytest.fixture
def logger():
    """Fresh logger instance."""
    return Logger()


@pytest.mark.unit
class TestGetLogLevel:
    """Tests for get_log_level method."""

    @pytest.mark.parametrize("value,expected", [
        ('DEBUG', LogLevel.DEBUG),
        ('VERBOSE', LogLevel.VERBOSE),
        ('INFO', LogLevel.INFO),
        ('WARNING', LogLevel.WARNING),
        ('ERROR', LogLevel.ERROR),
        ('debug', LogLevel.DEBUG),
        ('invalid', LogLevel.ERROR),
    ])
    def test_from_environment(self, logger, value, expected):
        """Test level read from HYPRCHOOSY_LOG_LEVEL."""
        with patch.dict(os.environ, {'HYPRCHOOSY_LOG_LEVEL': value}):
            assert logger.get_log_level() == expected

    def test_default(self, logger):
        """Test default log level (ERROR)."""
        assert logger.get_log_level() == LogLevel.ERROR

    def test_cached(self, logger):
        """Test log level is cached."""
        with patch.dict(os.environ, {'HYPRCHOOSY_LOG_LEVEL': 'DEBUG'}):
            level1 = logger.get_log_level()
        with patch.dict(os.environ, {'HYPRCHOOSY_LOG_LEVEL': 'ERROR'}):
            level2 = logger.get_log_level()
        assert level1 == level2 == LogLevel.DEBUG

    def test_set_log_level(self, logger):
        """Test explicit override."""
        logger.set_log_level(LogLevel.INFO)
        assert logger.get_log_level() == LogLevel.INFO


@pytest.mark.unit
class TestLog:
    """Tests for log method."""

    @patch.dict(os.environ, {'HYPRCHOOSY_LOG_LEVEL': 'DEBUG'})
    def test_log_to_file(self, logger, log_dir):
        """Test logging to file."""
        logger.log(LogLevel.DEBUG, "Test message")
        content = (log_dir / "hyprchoosy.log").read_text()
        assert "DEBUG: Test message" in content
        assert datetime.now().strftime("%Y-%m-%d") in content

    @patch.dict(os.environ, {'HYPRCHOOSY_LOG_LEVEL': 'INFO'})
    def test_filtered_by_level(self, logger, log_dir):
        """Test messages filtered by log level."""
        logger.debug("Debug message")
        logger.info("Info message")
        content = (log_dir / "hyprchoosy.log").read_text()
        assert "Debug message" not in content
        assert "Info message" in content

    @patch.dict(os.environ, {'HYPRCHOOSY_LOG_LEVEL': 'DEBUG'})
    def test_format_args(self, logger, log_dir):
        """Test logging with format arguments."""
        logger.info("Client '%s' matched rule '%s'", "slack", "work")
        content = (log_dir / "hyprchoosy.log").read_text()
        assert "Client 'slack' matched rule 'work'" in content

    @patch.dict(os.environ, {'HYPRCHOOSY_LOG_LEVEL': 'DEBUG'})
    def test_format_error_handled(self, logger, log_dir):
        """Test format errors fall back to the raw message."""
        logger.debug("Message with %s", "too", "many")
        assert "Message with %s" in (log_dir / "hyprchoosy.log").read_text()

    def test_no_file_at_error_level(self, logger, log_dir):
        """Test nothing is written to disk by default."""
        with patch('sys.stderr.write'):
            logger.error("boom")
        assert logger.get_log_file() is None
        assert not log_dir.exists()

    def test_error_to_stderr(self, logger):
        """Test errors also go to stderr."""
        with patch('sys.stderr.write') as mock_stderr:
            logger.error("Error message")
            assert "Error message" in str(mock_stderr.call_args)

    @patch.dict(os.environ, {'HYPRCHOOSY_LOG_LEVEL': 'DEBUG'})
    def test_file_write_error_handled(self, logger):
        """Test file write errors are swallowed."""
        with patch('builtins.open', side_effect=PermissionError()):
            logger.debug("Test message")


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger and init_logger."""

    def test_singleton(self):
        assert get_logger() is get_logger()
        assert isinstance(get_logger(), Logger)

    def test_init_logger_debug(self, log_dir):
        logger = init_logger(debug=True)
        assert logger.get_log_level() == LogLevel.DEBUG
        content = (log_dir / "hyprchoosy.log").read_text()
        assert "session started" in content

    def test_init_logger_quiet_by_default(self, log_dir):
        logger = init_logger()
        assert logger.get_log_level() == LogLevel.ERROR
        assert not log_dir.exists()
