"""Unit tests for logging infrastructure."""

import json
import logging
import sys

from src.utils.logger import JSONFormatter, RichTextFormatter, get_logger, record_context


def make_record(msg="Test message", level=logging.INFO, name="test_logger", exc_info=None):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


def fresh_logger_name(name):
    """Drop handlers left by a previous test so get_logger reconfigures."""
    if name in logging.Logger.manager.loggerDict:
        logging.getLogger(name).handlers.clear()
    return name


class TestJSONFormatter:
    """Test JSONFormatter produces valid JSON output."""

    def test_json_formatter_outputs_valid_json(self):
        """Test that JSONFormatter produces valid JSON."""
        output = JSONFormatter().format(make_record())
        parsed = json.loads(output)

        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "test_logger"
        assert parsed["message"] == "Test message"
        assert "timestamp" in parsed
        assert "request_seq" not in parsed

    def test_json_formatter_includes_exception_traceback(self):
        """Test that JSONFormatter includes exception traceback when present."""
        try:
            raise ValueError("Test error")
        except ValueError:
            record = make_record("Error occurred", logging.ERROR, exc_info=sys.exc_info())

        parsed = json.loads(JSONFormatter().format(record))

        assert "exception" in parsed
        assert "ValueError" in parsed["exception"]

    def test_json_formatter_with_request_seq(self):
        """Test that JSONFormatter includes request_seq if present."""
        record = make_record()
        record.request_seq = 3

        parsed = json.loads(JSONFormatter().format(record))

        assert parsed["request_seq"] == 3


class TestRichTextFormatter:
    """Test RichTextFormatter produces colored text output."""

    def test_rich_text_formatter_includes_emoji_icon(self):
        """Test that RichTextFormatter includes emoji icons for each level."""
        formatter = RichTextFormatter()
        for level, icon in [
            (logging.DEBUG, "🔍"),
            (logging.INFO, "ℹ️"),
            (logging.WARNING, "⚠️"),
            (logging.ERROR, "❌"),
        ]:
            assert icon in formatter.format(make_record(level=level))

    def test_rich_text_formatter_includes_level_logger_and_message(self):
        """Test that RichTextFormatter includes level, logger name and message."""
        output = RichTextFormatter().format(make_record("Custom message", name="my_logger"))

        assert "INFO" in output
        assert "my_logger" in output
        assert "Custom message" in output

    def test_rich_text_formatter_includes_request_seq(self):
        """Test that RichTextFormatter prefixes the search sequence number."""
        record = make_record()
        record.request_seq = 7

        assert "[#7]" in RichTextFormatter().format(record)

    def test_rich_text_formatter_includes_exception_traceback(self):
        """Test that RichTextFormatter includes exception traceback."""
        try:
            raise RuntimeError("Test error")
        except RuntimeError:
            record = make_record("Error occurred", logging.ERROR, exc_info=sys.exc_info())

        output = RichTextFormatter().format(record)
        assert "RuntimeError" in output
        assert "Test error" in output


class TestGetLogger:
    """Test get_logger function."""

    def test_get_logger_returns_same_configured_instance(self):
        """Test that get_logger does not stack handlers on repeated calls."""
        logger1 = get_logger("test_module_repeat")
        logger2 = get_logger("test_module_repeat")

        assert logger1 is logger2
        assert len(logger2.handlers) == 1

    def test_get_logger_respects_log_level_env(self, monkeypatch):
        """Test that get_logger respects LOG_LEVEL environment variable."""
        name = fresh_logger_name("test_level_logger")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert get_logger(name).level == logging.DEBUG

    def test_invalid_log_level_defaults_to_info(self, monkeypatch):
        """Test that invalid LOG_LEVEL defaults to INFO."""
        name = fresh_logger_name("test_invalid_level")
        monkeypatch.setenv("LOG_LEVEL", "INVALID")

        assert get_logger(name).level == logging.INFO

    def test_get_logger_respects_log_type_json(self, monkeypatch):
        """Test that get_logger uses JSONFormatter with LOG_TYPE=json."""
        name = fresh_logger_name("test_json_logger")
        monkeypatch.setenv("LOG_TYPE", "json")

        handler = get_logger(name).handlers[0]
        assert isinstance(handler.formatter, JSONFormatter)

    def test_log_type_text_default(self, monkeypatch):
        """Test that LOG_TYPE defaults to text."""
        name = fresh_logger_name("test_default_type")
        monkeypatch.delenv("LOG_TYPE", raising=False)

        handler = get_logger(name).handlers[0]
        assert isinstance(handler.formatter, RichTextFormatter)


class TestModuleLevelLogger:
    """Test module-level logger instance."""

    def test_logger_is_importable(self):
        """Test that logger can be imported from logger module."""
        from src.utils.logger import logger as imported_logger

        assert isinstance(imported_logger, logging.Logger)
        assert imported_logger.name == "recipe_finder"
        assert len(imported_logger.handlers) > 0

    def test_aiohttp_logs_quietened(self):
        """Test that aiohttp debug output is suppressed."""
        import src.utils.logger  # noqa: F401

        assert logging.getLogger("aiohttp").level == logging.WARNING


class TestRecordContext:
    """Test extraction of search context from records."""

    def test_record_without_context(self):
        assert record_context(make_record()) == {}

    def test_record_with_request_seq(self):
        record = make_record()
        record.request_seq = 4
        assert record_context(record) == {"request_seq": 4}

    def test_critical_level_formatted(self):
        """Test that CRITICAL records get a style instead of falling back to plain text."""
        output = RichTextFormatter().format(make_record(level=logging.CRITICAL))
        assert "CRITICAL" in output
        assert "❌" in output

    def test_unknown_log_type_falls_back_to_text(self, monkeypatch):
        name = fresh_logger_name("test_unknown_type")
        monkeypatch.setenv("LOG_TYPE", "xml")

        handler = get_logger(name).handlers[0]
        assert isinstance(handler.formatter, RichTextFormatter)
