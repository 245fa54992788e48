"""Structured Logging: JSON and text formatters, installed once per process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (order_id, error_code, path, method, field) surfaced when present,
      in both formats
    - setup_logging owns exactly one root handler; calling it again replaces it

Design Decisions:
    - Formatters on stdlib logging: no extra dependency for two formatters
    - Handler replaced rather than stacked: each app built by create_app runs the
      lifespan, and duplicate handlers would print every line twice
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = ("order_id", "error_code", "path", "method", "field")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines with extras appended as key=value pairs."""

    def __init__(self):
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extras(record)
        if extras:
            line += " [" + " ".join(f"{k}={v}" for k, v in extras.items()) + "]"
        return line


_installed_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    global _installed_handler
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _installed_handler = handler
    return handler
