"""Diagnostic logging for Recipe Finder.

Every module logs through the shared "recipe_finder" logger. Records go to
stdout as coloured text (default) or as one JSON object per line.

Environment:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
- LOG_TYPE: text, json (default: text)
"""

import json
import logging
import os
import sys
from typing import Any

LOGGER_NAME = "recipe_finder"

# Attributes callers attach with extra={...}, e.g. the search sequence number
CONTEXT_FIELDS = ("request_seq",)


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Context attributes present on the record, in CONTEXT_FIELDS order."""
    return {field: getattr(record, field) for field in CONTEXT_FIELDS if hasattr(record, field)}


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class RichTextFormatter(logging.Formatter):
    """Single-line coloured text prefixed with a level icon.

    Search context is shown as "[#<seq>]" ahead of the message.
    """

    STYLES = {
        logging.DEBUG: ("\033[36m", "🔍"),
        logging.INFO: ("\033[32m", "ℹ️"),
        logging.WARNING: ("\033[33m", "⚠️"),
        logging.ERROR: ("\033[31m", "❌"),
        logging.CRITICAL: ("\033[1;31m", "❌"),
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color, icon = self.STYLES.get(record.levelno, ("", ""))
        context = "".join(f"[#{value}] " for value in record_context(record).values())
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")

        line = f"{color}{icon} {timestamp} {record.levelname:<8} {record.name:<16} {context}{record.getMessage()}{self.RESET}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


FORMATTERS = {
    "text": RichTextFormatter,
    "json": JSONFormatter,
}


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the named logger, attaching a stdout handler on first use.

    Level and format are read from LOG_LEVEL and LOG_TYPE at that moment.
    Later calls return the configured logger unchanged. Unknown values fall
    back to INFO and text.
    """
    instance = logging.getLogger(name)
    if instance.handlers:
        return instance

    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO
    formatter_cls = FORMATTERS.get(os.getenv("LOG_TYPE", "text").lower(), RichTextFormatter)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter_cls())
    instance.setLevel(level)
    instance.addHandler(handler)
    return instance


logger = get_logger()

# aiohttp logs every connection at DEBUG
logging.getLogger("aiohttp").setLevel(logging.WARNING)
