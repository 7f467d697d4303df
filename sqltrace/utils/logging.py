"""Centralized logging configuration for sqltrace.

Every logger handed out here lives under the ``sqltrace`` namespace and carries
a correlation ID filter, so rendered statements can be tied back to the request
or session that produced them.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from sqltrace._serialization import encode_json
from sqltrace.exceptions import ImproperConfigurationError

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = (
    "CorrelationIDFilter",
    "StructuredFormatter",
    "configure_logging",
    "correlation_id_var",
    "get_correlation_id",
    "get_logger",
    "log_with_context",
    "set_correlation_id",
)

correlation_id_var: ContextVar[str | None] = ContextVar("sqltrace_correlation_id", default=None)

_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: The correlation ID to set, or None to clear
    """
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> str | None:
    """Get the current correlation ID.

    Returns:
        The current correlation ID or None if not set
    """
    return correlation_id_var.get()


class StructuredFormatter(logging.Formatter):
    """Structured JSON formatter with correlation ID support."""

    def format(self, record: LogRecord) -> str:
        """Format log record as structured JSON.

        Args:
            record: The log record to format

        Returns:
            JSON formatted log entry
        """
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = getattr(record, "correlation_id", None) or get_correlation_id()
        if correlation_id:
            log_entry["correlation_id"] = correlation_id

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, dict):
            log_entry.update(extra_fields)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return encode_json(log_entry)


class CorrelationIDFilter(logging.Filter):
    """Filter that adds correlation ID to log records."""

    def filter(self, record: LogRecord) -> bool:
        """Add correlation ID to record if available.

        Args:
            record: The log record to filter

        Returns:
            Always True to pass the record through
        """
        if correlation_id := get_correlation_id():
            record.correlation_id = correlation_id
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance with standardized configuration.

    Args:
        name: Logger name. If not provided, returns the root sqltrace logger.

    Returns:
        Configured logger instance
    """
    if name is None:
        return logging.getLogger("sqltrace")

    if not name.startswith("sqltrace"):
        name = f"sqltrace.{name}"

    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIDFilter) for f in logger.filters):
        logger.addFilter(CorrelationIDFilter())

    return logger


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        msg = f"Unknown log level {level!r}, expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
        raise ImproperConfigurationError(msg)
    return resolved


def configure_logging(level: str | int = "INFO", format_style: str = "structured", log_to_file: str | None = None) -> None:
    """Send sqltrace log records to stderr and, optionally, a file.

    Rendered statements reach the ``sqltrace.trace`` logger at DEBUG level, so
    a DEBUG configuration captures every traced line alongside diagnostics.
    The file handler always writes one JSON object per line.

    Args:
        level: Level name or number for the ``sqltrace`` namespace.
        format_style: ``"structured"`` for JSON on stderr, ``"simple"`` for text.
        log_to_file: Path of a file to append JSON records to.

    Raises:
        ImproperConfigurationError: If ``level`` is not a known level name.
    """
    root_logger = logging.getLogger("sqltrace")
    root_logger.setLevel(_resolve_level(level))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    formatter: logging.Formatter = (
        StructuredFormatter() if format_style == "structured" else logging.Formatter(_TEXT_FORMAT)
    )
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        file_handler = logging.FileHandler(log_to_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    root_logger.propagate = False

    log_with_context(
        root_logger,
        logging.DEBUG,
        "sqltrace logging configured",
        level=logging.getLevelName(root_logger.level),
        format_style=format_style,
        log_file=log_to_file,
    )


def log_with_context(logger: logging.Logger, level: int, message: str, /, **extra_fields: Any) -> None:
    """Log a message with structured extra fields.

    Args:
        logger: The logger to use
        level: Log level
        message: Log message
        **extra_fields: Additional fields to include in structured logs
    """
    if not logger.isEnabledFor(level):
        return
    logger.log(level, message, extra={"extra_fields": extra_fields})
