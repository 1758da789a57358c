"""Tests for logging utilities."""

import json
import logging
import logging.handlers

import pytest

from millisecond.models.breakdown import DurationBreakdown
from millisecond.utils.logging import (
    TRACE_LEVEL,
    JSONFormatter,
    get_logger,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures them."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestTraceLevel:
    """Test TRACE level functionality."""

    def test_trace_level_constant(self):
        """Test TRACE level constant value."""
        assert TRACE_LEVEL == 5

    def test_trace_level_name(self):
        """Test TRACE level name is registered."""
        assert logging.getLevelName(TRACE_LEVEL) == "TRACE"

    def test_logger_trace_method(self):
        """Test logger has trace method."""
        logger = get_logger("test")
        assert hasattr(logger, "trace")

    def test_trace_method_logging(self, caplog):
        """Test trace method logs correctly."""
        logger = get_logger("test")
        logger.setLevel(TRACE_LEVEL)

        with caplog.at_level(TRACE_LEVEL):
            logger.trace("Test trace message")

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == TRACE_LEVEL
        assert "Test trace message" in caplog.text

    def test_trace_method_disabled_by_level(self, caplog):
        """Test trace method respects log level."""
        logger = get_logger("test")
        logger.setLevel(logging.DEBUG)

        with caplog.at_level(logging.DEBUG):
            logger.trace("Test trace message")

        assert len(caplog.records) == 0

    def test_decomposition_traced(self, caplog):
        """Test constructors emit a TRACE record."""
        with caplog.at_level(TRACE_LEVEL, logger="millisecond.models.breakdown"):
            DurationBreakdown.from_millis(61_000)

        assert "Split 61000 millis into" in caplog.text


class TestJSONFormatter:
    """Test JSONFormatter class."""

    def _record(self, **kwargs):
        defaults = dict(
            name="millisecond.test",
            level=logging.INFO,
            pathname="/test/path.py",
            lineno=42,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_json_formatter_basic(self):
        """Test basic JSON formatting."""
        record = self._record()
        record.funcName = "test_function"

        log_data = json.loads(JSONFormatter().format(record))

        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "millisecond.test"
        assert log_data["message"] == "Test message"
        assert log_data["module"] == "path"
        assert log_data["function"] == "test_function"
        assert log_data["line"] == 42
        assert "timestamp" in log_data
        assert "context" not in log_data

    def test_json_formatter_with_extra_context(self):
        """Test attributes passed through extra land in context."""
        record = self._record()
        record.unit = "millis"
        record.value = -1

        log_data = json.loads(JSONFormatter().format(record))

        assert log_data["context"] == {"unit": "millis", "value": -1}

    def test_json_formatter_keeps_non_ascii(self):
        """Test the micro sign is written unescaped."""
        record = self._record(msg="Rendered %s", args=("800µs",))

        result = JSONFormatter().format(record)

        assert "800µs" in result

    def test_json_formatter_with_exception(self):
        """Test JSON formatting with exception info."""
        try:
            raise ValueError("Test exception")
        except ValueError:
            import sys

            record = self._record(level=logging.ERROR, exc_info=sys.exc_info())

        log_data = json.loads(JSONFormatter().format(record))

        assert log_data["exception"]["type"] == "ValueError"
        assert log_data["exception"]["message"] == "Test exception"
        assert "Traceback" in log_data["exception"]["traceback"]

    def test_json_formatter_without_traceback(self):
        """Test JSON formatting without traceback."""
        try:
            raise ValueError("Test exception")
        except ValueError:
            import sys

            record = self._record(level=logging.ERROR, exc_info=sys.exc_info())

        log_data = json.loads(JSONFormatter(include_traceback=False).format(record))

        assert "exception" not in log_data


class TestSetupLogging:
    """Test setup_logging function."""

    def test_setup_logging_console_only(self, restore_root_logger):
        """Test console-only setup adds a single stream handler."""
        setup_logging(log_level="DEBUG")

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert restore_root_logger.level == logging.DEBUG

    def test_setup_logging_with_file(self, tmp_path, restore_root_logger):
        """Test file logging creates the directory and writes records."""
        log_dir = tmp_path / "logs"

        setup_logging(log_dir=log_dir, console_output=False)
        get_logger("millisecond.test").info("hello")

        assert log_dir.exists()
        assert "hello" in (log_dir / "millisecond.log").read_text(encoding="utf-8")

    def test_setup_logging_json_file(self, tmp_path, restore_root_logger):
        """Test JSON file logging writes one JSON object per line."""
        setup_logging(
            log_dir=tmp_path,
            log_file="custom.log",
            console_output=False,
            json_format=True,
        )
        get_logger("millisecond.test").warning("careful")

        line = (tmp_path / "custom.log").read_text(encoding="utf-8").splitlines()[0]
        assert json.loads(line)["message"] == "careful"

    def test_setup_logging_trace_level(self, restore_root_logger):
        """Test logging setup with TRACE level."""
        setup_logging(log_level="trace")

        assert restore_root_logger.level == TRACE_LEVEL

    def test_setup_logging_replaces_handlers(self, restore_root_logger):
        """Test repeated setup does not stack handlers."""
        setup_logging()
        setup_logging()

        assert len(restore_root_logger.handlers) == 1

    def test_setup_logging_without_console(self, restore_root_logger):
        """Test no handlers without console or file output."""
        setup_logging(console_output=False)

        assert restore_root_logger.handlers == []
