"""Logging setup for configuration passes, with structured JSON support."""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

from .config import settings

# Attributes every LogRecord carries; anything else was passed via ``extra``.
_RESERVED_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "thread",
        "threadName",
        "taskName",
    }
)


def _record_extra(record: logging.LogRecord) -> dict[str, Any]:
    extra: dict[str, Any] = {}
    for key, value in record.__dict__.items():
        if key in _RESERVED_ATTRS or key.startswith("_"):
            continue
        try:
            json.dumps(value)
            extra[key] = value
        except (TypeError, ValueError):
            extra[key] = str(value)
    return extra


class JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Builder calls attach ``section``, ``field``, ``plugin`` or ``content_hash``
    through ``extra``; those end up under the ``extra`` key.
    """

    def __init__(self, include_extra: bool = True) -> None:
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        if record.stack_info:
            log_entry["stack_info"] = record.stack_info

        if self.include_extra:
            extra = _record_extra(record)
            if extra:
                log_entry["extra"] = extra

        return json.dumps(log_entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter with colors for development."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
            "%Y-%m-%d %H:%M:%S"
        )

        formatted = (
            f"{timestamp} - {color}{record.levelname:8}{self.RESET} - "
            f"{record.name} - {record.getMessage()}"
        )

        # Builder context is short, keep it on the same line
        extra = _record_extra(record)
        if extra:
            formatted += " [" + " ".join(f"{key}={value}" for key, value in extra.items()) + "]"

        if record.exc_info:
            formatted += "\n" + "".join(traceback.format_exception(*record.exc_info))

        return formatted


def setup_logging() -> None:
    """Configure the ``ngrest`` logger.

    In production (ENVIRONMENT=production) records are emitted as JSON,
    elsewhere as colored console lines. LOG_FORMAT=json|console overrides the
    choice. Only the ``ngrest`` logger is touched so host applications keep
    control of the root logger.
    """
    log_level = getattr(logging, settings.log_level.upper())
    log_format = settings.log_format

    if log_format == "json":
        formatter: logging.Formatter = JSONFormatter()
    elif log_format == "console":
        formatter = ConsoleFormatter()
    elif settings.environment.lower() == "production":
        formatter = JSONFormatter()
    else:
        formatter = ConsoleFormatter()

    package_logger = logging.getLogger("ngrest")
    package_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)
    package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger instance with the given name.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Field opened", extra={"section": "list", "field": "email"})
    """
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds fixed context to every message.

    ``Config`` uses one per builder so each record names the model's REST URL.

    Example:
        >>> logger = LoggerAdapter(get_logger(__name__), {"rest_url": "admin/api-admin-user"})
        >>> logger.debug("Section opened", extra={"section": "list"})
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs
