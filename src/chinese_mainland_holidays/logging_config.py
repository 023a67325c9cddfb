"""
Logging Setup (Structured JSON)

The library logs through ``logging.getLogger(__name__)`` and installs no
handlers by itself. Applications that want the library's records as JSON
lines call ``configure_logging()``.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from .config import Settings

LOGGER_NAME = "chinese_mainland_holidays"

# Extra record attributes copied into the JSON entry when present
EXTRA_FIELDS = ("source", "min_year", "max_year", "record_count", "pack_version")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a JSON stream handler to the package logger.

    Safe to call more than once; only one handler is ever installed.

    Args:
        level: Log level name; defaults to CMH_LOG_LEVEL

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = (level or Settings.from_env().log_level).upper()
    logger.setLevel(getattr(logging, level))

    if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
    return logger
