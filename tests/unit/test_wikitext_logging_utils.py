#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for command-line logging setup."""

import logging

import pytest

from wiki2md.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Test level name resolution."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("debug", logging.DEBUG),
            ("WARNING", logging.WARNING),
            (logging.ERROR, logging.ERROR),
            ("nonsense", logging.INFO),
        ],
    )
    def test_resolution(self, value, expected: int) -> None:
        """Test names, numbers and the fallback."""
        assert resolve_log_level(value) == expected


@pytest.mark.unit
class TestConfigureLogging:
    """Test package logger configuration."""

    def test_console_handler(self) -> None:
        """Test that a single stderr handler is installed."""
        logger = configure_logging("info")
        assert logger.name == PACKAGE_LOGGER_NAME
        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert len(logger.handlers) == 1

    def test_reconfiguring_replaces_handlers(self) -> None:
        """Test that repeated calls do not stack handlers."""
        configure_logging("info")
        logger = configure_logging(logging.DEBUG)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_root_logger_untouched(self) -> None:
        """Test that only the package logger is configured."""
        root_handlers = list(logging.getLogger().handlers)
        configure_logging("debug")
        assert logging.getLogger().handlers == root_handlers

    def test_log_file(self, tmp_path) -> None:
        """Test that messages are teed to the log file."""
        log_file = tmp_path / "wiki2md.log"
        logger = configure_logging("info", log_file=str(log_file))
        logging.getLogger("wiki2md.parsers").info("parsed page")
        for handler in logger.handlers:
            handler.flush()
        assert len(logger.handlers) == 2
        assert "INFO: parsed page" in log_file.read_text(encoding="utf-8")

    def test_trace_format(self, tmp_path) -> None:
        """Test that trace mode includes the logger name."""
        log_file = tmp_path / "trace.log"
        configure_logging("debug", log_file=str(log_file), trace_mode=True)
        logging.getLogger("wiki2md.renderers").debug("rendered")
        assert "[wiki2md.renderers] rendered" in log_file.read_text(encoding="utf-8")
