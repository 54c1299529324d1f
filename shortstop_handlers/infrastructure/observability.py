"""Structured Logging — JSON formatter and setup for handler observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (handler, token, base_dir, error_code) surfaced when present
    - JSON format by default, human-readable on request
    - Library modules never configure logging on import; callers opt in

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once by the embedding application
"""

import logging
import json
from datetime import datetime, timezone

from shortstop_handlers.config import get_settings


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in (
            "handler", "token", "base_dir", "error_code",
            "specifier", "match_count",
        ):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str | None = None, fmt: str | None = None):
    """Configure root logging. Falls back to Settings for unset arguments."""
    settings = get_settings()
    level = level or settings.log_level
    fmt = fmt or settings.log_format
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
