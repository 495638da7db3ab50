"""Tests for logging setup."""

import pytest
import structlog

from querier.core.logging import get_logger, setup_logging


@pytest.mark.unit
class TestSetupLogging:
    def test_setup_without_errors(self):
        setup_logging()

    def test_setup_verbose(self):
        setup_logging(verbose=True)


@pytest.mark.unit
class TestGetLogger:
    def test_get_logger_without_name(self):
        setup_logging()
        assert get_logger() is not None

    def test_get_logger_with_name(self):
        setup_logging()
        assert get_logger("test_module") is not None


@pytest.mark.unit
class TestLogOutput:
    def test_log_to_stderr(self, capsys):
        """Log output goes to stderr, not stdout."""
        setup_logging(verbose=True)
        get_logger().info("test message")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "test message" in captured.err

    def test_debug_hidden_without_verbose(self, capsys):
        setup_logging(verbose=False)
        get_logger().debug("quiet message")

        captured = capsys.readouterr()
        assert "quiet message" not in captured.err


@pytest.mark.unit
class TestUnconfiguredDefault:
    def test_get_logger_installs_quiet_default(self):
        structlog.reset_defaults()
        get_logger("querier.test")
        assert structlog.is_configured()

    def test_debug_silent_and_stdout_clean(self, capsys):
        structlog.reset_defaults()
        get_logger().debug("library debug")
        get_logger().warning("library warning")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "library debug" not in captured.err
        assert "library warning" in captured.err

    def test_existing_configuration_kept(self, capsys):
        setup_logging(verbose=True)
        get_logger().debug("verbose message")

        assert "verbose message" in capsys.readouterr().err
