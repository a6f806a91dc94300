"""
Tests for logging utilities.

This module tests logger setup, configuration, and logging functions.
"""

import logging

import pytest

from clusterconf.core.utils.logger import (
    get_logger,
    log_configuration_change,
    log_debug,
    log_file_operation,
    log_info,
    log_warning,
    reset_logging,
    setup_logging,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_sets_up_logger_with_defaults(self, monkeypatch):
        """Test that logger is set up with default values."""
        monkeypatch.delenv("CLUSTERCONF_LOG_LEVEL", raising=False)
        logger = setup_logging()

        assert logger.name == "clusterconf"
        assert logger.level == logging.INFO

    def test_sets_custom_log_level(self):
        """Test that custom log level is set."""
        logger = setup_logging(level="debug")

        assert logger.level == logging.DEBUG

    def test_reads_level_from_environment(self, monkeypatch):
        """Test that CLUSTERCONF_LOG_LEVEL is used when no level is given."""
        monkeypatch.setenv("CLUSTERCONF_LOG_LEVEL", "ERROR")
        logger = setup_logging()

        assert logger.level == logging.ERROR

    def test_sets_up_file_logging(self, tmp_path):
        """Test that file logging is set up when log_file is provided."""
        log_file = tmp_path / "test.log"
        logger = setup_logging(log_file=str(log_file))

        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        for handler in file_handlers:
            handler.close()

    def test_reconfiguring_replaces_handlers(self):
        """Test that repeated setup does not stack handlers."""
        logger1 = setup_logging()
        logger2 = setup_logging()

        assert logger1 is logger2
        assert len(logger2.handlers) == 1

    def test_uses_custom_format(self):
        """Test that custom format string is used."""
        custom_format = "%(levelname)s - %(message)s"
        logger = setup_logging(format_string=custom_format)

        assert logger.handlers[0].formatter._fmt == custom_format


class TestGetLogger:
    """Tests for get_logger function."""

    def test_initializes_lazily(self):
        reset_logging()
        logger = get_logger()

        assert logger.name == "clusterconf"
        assert logger.handlers

    def test_returns_configured_instance(self):
        configured = setup_logging(level="WARNING")

        assert get_logger() is configured


class TestLogHelpers:
    """Tests for the formatted logging helpers."""

    @pytest.fixture(autouse=True)
    def debug_level(self):
        setup_logging(level="DEBUG")

    def test_module_prefix_and_context(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="clusterconf"):
            log_info("config", "Registered group", "master")
            log_debug("config", "Finalized")
            log_warning("config", "Ignoring field")

        assert "[CONFIG] Registered group | Context: master" in caplog.text
        assert "[CONFIG] Finalized" in caplog.text
        assert "[CONFIG] Ignoring field" in caplog.text

    def test_log_configuration_change(self, caplog):
        with caplog.at_level(logging.INFO, logger="clusterconf"):
            log_configuration_change("master.http_port", None, 8080)

        assert "Configuration changed: master.http_port = None -> 8080" in caplog.text

    def test_log_file_operation(self, caplog):
        with caplog.at_level(logging.INFO, logger="clusterconf"):
            log_file_operation("write", "/tmp/config.json", True)
            log_file_operation("write", "/tmp/config.json", False, "disk full")

        assert "File write: /tmp/config.json" in caplog.text
        assert "File write failed: /tmp/config.json - disk full" in caplog.text
