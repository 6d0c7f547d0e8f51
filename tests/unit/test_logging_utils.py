#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for the command line logging setup."""

import logging

import pytest

from lexdoc.logging_utils import CONSOLE_FORMAT, TRACE_FORMAT, configure_logging, resolve_log_level


@pytest.fixture
def clean_root_logger():
    """Restore the root logger after a test reconfigures it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestResolveLogLevel:
    """Tests for resolve_log_level."""

    @pytest.mark.parametrize(
        "value,expected",
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR), ("bogus", logging.INFO)],
    )
    def test_levels(self, value, expected):
        """Test names, numbers and unknown names."""
        assert resolve_log_level(value) == expected


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_handler(self, clean_root_logger):
        """Test that a single stderr handler is installed."""
        root = configure_logging("INFO")
        assert root is clean_root_logger
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == CONSOLE_FORMAT

    def test_repeated_calls_do_not_duplicate(self, clean_root_logger):
        """Test that reconfiguring replaces the handlers."""
        configure_logging("INFO")
        root = configure_logging("DEBUG")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_trace_mode(self, clean_root_logger):
        """Test the trace format."""
        root = configure_logging(logging.DEBUG, trace_mode=True)
        assert root.handlers[0].formatter._fmt == TRACE_FORMAT

    def test_log_file(self, clean_root_logger, tmp_path):
        """Test that records are also written to the log file."""
        log_path = tmp_path / "run.log"
        root = configure_logging("INFO", log_file=str(log_path))
        assert len(root.handlers) == 2
        logging.getLogger("lexdoc.test").warning("Render depth limit reached")
        for handler in root.handlers:
            handler.flush()
        content = log_path.read_text(encoding="utf-8")
        assert "Logging to file" in content
        assert "Render depth limit reached" in content

    def test_unwritable_log_file(self, clean_root_logger, tmp_path):
        """Test that a bad log path keeps console logging."""
        root = configure_logging("INFO", log_file=str(tmp_path / "missing" / "run.log"))
        assert len(root.handlers) == 1
