"""
Structured logging for subsorter.

The console gets Rich-formatted records; an optional log file receives one
JSON object per record so that per-folder failures can be post-processed.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from subsorter.shared.constants import LogConfig, LogLevel
from subsorter.shared.errors import SubSorterError


class StructuredFormatter(logging.Formatter):
    """Formatter emitting log records as JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string for the record
        """
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created,
                tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "error_code"):
            log_entry["error_code"] = record.error_code

        if hasattr(record, "context"):
            log_entry["context"] = record.context

        if hasattr(record, "operation"):
            log_entry["operation"] = record.operation

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False)


def _create_rich_console() -> Console:
    """Create the Rich console used for log output."""
    custom_theme = Theme(
        {
            "logging.level.debug": "cyan",
            "logging.level.info": "green",
            "logging.level.warning": "yellow",
            "logging.level.error": "red bold",
            "logging.level.critical": "red bold reverse",
        }
    )
    return Console(theme=custom_theme, stderr=True)


def setup_logging(
    level: str = LogLevel.INFO,
    log_file: Path | None = None,
    *,
    use_rich_console: bool = True,
) -> logging.Logger:
    """
    Configure the ``subsorter`` logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL), any case
        log_file: Optional file receiving JSON structured records
        use_rich_console: Use a RichHandler for the console, otherwise JSON

    Returns:
        The configured package logger

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    logger = logging.getLogger(LogConfig.LOGGER_NAME)

    # Drop handlers from an earlier call so records are not duplicated
    for existing in logger.handlers[:]:
        existing.close()
        logger.removeHandler(existing)

    log_level = getattr(logging, LogLevel(level.upper()).value)
    logger.setLevel(log_level)

    if use_rich_console:
        handler: logging.Handler = RichHandler(
            console=_create_rich_console(),
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%H:%M:%S]",
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
    handler.setLevel(log_level)
    logger.addHandler(handler)

    # File handler, always JSON
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def log_operation_error(
    logger: logging.Logger,
    error: SubSorterError,
    folder: Path | None = None,
    operation: str | None = None,
) -> None:
    """
    Log a SubSorterError as one line tagged with its folder.

    Args:
        logger: Logger instance
        error: The error to record
        folder: Title folder the error belongs to
        operation: Operation name overriding the one in the error context
    """
    context_dict = error.context.safe_dict()
    if folder is not None:
        context_dict["folder"] = str(folder)

    prefix = f"{folder}: " if folder is not None else ""
    logger.error(
        "%s%s",
        prefix,
        error,
        extra={
            "error_code": error.code.name,
            "context": context_dict,
            "operation": operation or error.context.operation,
        },
        exc_info=(
            error.original_error if logger.isEnabledFor(logging.DEBUG) else None
        ),
    )
