"""
Logging setup (structured JSON or plain text).

All package loggers live under the ``shukujitsu`` logger.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Optional, TextIO

from .config import Settings

LOGGER_NAME = "shukujitsu"

# Extra attributes copied into JSON log entries when present
EXTRA_FIELDS = ("request_id", "path", "status_code", "duration_ms", "query", "result_count")


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


TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    settings: Optional[Settings] = None, stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the package logger from settings.

    Safe to call repeatedly: the handler installed by a previous call is
    replaced, not duplicated.
    """
    settings = settings or Settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level.upper()))

    for existing in list(logger.handlers):
        if getattr(existing, "_shukujitsu_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream)
    if settings.log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    handler._shukujitsu_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
