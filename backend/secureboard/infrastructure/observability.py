"""Structured Logging — JSON and text formatters for the SecureBoard API.

Invariants:
    - Every record carries timestamp, level, logger, service and message
    - Only whitelisted extras (error_code, path, user_id, comment_id, ...) are emitted;
      comment content and credentials are never among them
    - setup_logging is idempotent: calling it twice installs one handler, not two
    - httpx request lines and SQLAlchemy engine echo stay at WARNING unless DEBUG

Design Decisions:
    - Formatters on stdlib logging: no extra dependency, full control over fields
    - Text format appends the same extras as key=value so both modes show the same data
"""

import json
import logging
from datetime import datetime, timezone

SERVICE_NAME = "secureboard-api"

EXTRA_FIELDS = (
    "error_code", "path", "user_id", "comment_id", "attempt", "status_code",
)

_QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")


def _extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": SERVICE_NAME,
            "message": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines for local development, extras as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extras(record)
        if extras:
            line += " " + " ".join(f"{k}={v}" for k, v in extras.items())
        return line


class _SecureBoardHandler(logging.StreamHandler):
    """Marker type so setup_logging can find and replace its own handler."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure root logging for the application."""
    handler = _SecureBoardHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())

    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _SecureBoardHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)

    resolved = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(resolved)
    quiet_level = resolved if resolved <= logging.DEBUG else logging.WARNING
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
