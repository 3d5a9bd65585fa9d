"""
Structured JSON logging utilities.

Library modules log through plain module loggers. Applications that ship
logs to a collector can switch the package to single-line JSON output with
configure_structured_logging().
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

PACKAGE_LOGGER = "nostr_drive"

# LogRecord attributes that are not user supplied context
_STANDARD_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "taskName", "message",
    }
)


class StructuredJsonFormatter(logging.Formatter):
    """
    Render records as one JSON object per line.

    Service records carry the aggregate being edited, so a publish line
    looks like:

        {"timestamp": "...", "level": "INFO", "logger": "nostr_drive.services.base",
         "message": "Published folder ...", "service": "folder",
         "coordinate": "30045:<pubkey>:docs", "event_id": "..."}

    Any other extra attribute is emitted as-is, or as its str() when it is
    not JSON serializable.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                try:
                    json.dumps(value)
                    log_obj[key] = value
                except (TypeError, ValueError):
                    log_obj[key] = str(value)

        return json.dumps(log_obj, default=str)


def configure_structured_logging(
    level: int | str = logging.INFO,
    logger_name: str | None = PACKAGE_LOGGER,
) -> logging.Logger:
    """
    Configure structured JSON logging.

    Args:
        level: Logging level (default: INFO)
        logger_name: Logger to configure (default: the nostr_drive package logger)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredJsonFormatter())

    logger.addHandler(handler)
    logger.setLevel(level)

    return logger


def get_drive_logger(name: str) -> logging.Logger:
    """
    Get a logger for a nostr-drive component.

    Args:
        name: Component name (e.g., 'codec', 'store')

    Returns:
        Logger instance with name 'nostr_drive.{name}'
    """
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


class DriveLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that adds service context to all log messages.

    Per-call extra values (such as the coordinate being edited) are merged
    over the adapter's own context.
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra", {}))
        kwargs["extra"] = extra
        return msg, kwargs
