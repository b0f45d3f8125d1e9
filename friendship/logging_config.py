"""
Centralized logging configuration for friendship.

Format: 2026-01-06T14:05:52Z [source] LEVEL message

Environment Variables (read through friendship.settings):
    FRIENDSHIP_LOG_LEVEL: "TRACE", "DEBUG", "INFO" (default), "WARNING" or "ERROR"
               - INFO: Normal operation logs
               - DEBUG: Every vertex and edge insertion
               - TRACE: Per-query traversal details
    FRIENDSHIP_LOG_SOURCE: Identifier shown in brackets (default "friendship")

Usage:
    from friendship.logging_config import configure_logging, get_logger

    configure_logging(stream=sys.stderr)
    logger = get_logger(__name__)
    logger.info("Graph built")
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

from .settings import get_settings

# Custom TRACE level for very verbose diagnostics
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def _trace(self: logging.Logger, message: object, *args: object, **kw: object) -> None:
    """Log a message at TRACE level (5)."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kw)  # type: ignore[arg-type]


logging.Logger.trace = _trace  # type: ignore[attr-defined]

_LEVELS_BY_NAME = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class ISO8601Formatter(logging.Formatter):
    """Formatter producing ISO8601 timestamps in UTC.

    Output format: 2026-01-06T14:05:52Z [source] LEVEL message
    """

    def __init__(self, source: str = "friendship"):
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()

        if record.exc_info:
            exception_text = self.formatException(record.exc_info)
            message = f"{message}\n{exception_text}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


def level_from_name(name: str) -> int:
    """Map a level name (case-insensitive, TRACE included) to its number.

    Unknown names fall back to INFO.
    """
    return _LEVELS_BY_NAME.get(name.upper(), logging.INFO)


def configure_logging(
    source: str | None = None,
    level: int | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure logging for a friendship entry point.

    Args:
        source: Source identifier shown in brackets (defaults to FRIENDSHIP_LOG_SOURCE)
        level: Logging level (defaults to FRIENDSHIP_LOG_LEVEL)
        stream: Handler output (defaults to stdout)

    Returns:
        Configured root logger
    """
    settings = get_settings()
    if source is None:
        source = settings.log_source
    if level is None:
        level = level_from_name(settings.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source))
    root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
