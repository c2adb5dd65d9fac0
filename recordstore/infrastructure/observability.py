"""Structured Logging — JSON formatter and setup for store observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (store_name, record_id, operation, status) surfaced when present
    - JSON format by default, human-readable text on request

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging is opt-in: a library never configures logging on import
    - Repeated setup_logging calls reconfigure the one handler it installed
"""

import json
import logging
from datetime import datetime, timezone

from recordstore.config import get_settings

_EXTRA_KEYS: tuple[str, ...] = ("store_name", "record_id", "operation", "status")
_HANDLER_NAME = "recordstore"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def _installed_handler() -> logging.Handler | None:
    for handler in logging.root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """Configure root logging. Falls back to Settings for unset arguments."""
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format

    handler = _installed_handler()
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        logging.root.addHandler(handler)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
