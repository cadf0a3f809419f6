"""Structured logging for the segmentation tools.

This module provides:
- Structured logging configuration (key=value format)
- A run ID context so every record of one segmentation run can be traced

Example:
    >>> from app.logging import setup_logging, run_context
    >>> setup_logging("INFO")
    >>> with run_context() as run_id:
    ...     pass
"""

import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator


# Context variable for the current run ID
run_id_var: ContextVar[str] = ContextVar("run_id", default="")


# =============================================================================
# Custom Logging Formatter
# =============================================================================


class StructuredFormatter(logging.Formatter):
    """Structured log formatter producing key=value output.

    Formats log messages as:
        timestamp=ISO8601 level=LEVEL logger=NAME run_id=ID message=MSG
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as structured key=value pairs."""
        timestamp = self.formatTime(record, self.datefmt)

        run_id = run_id_var.get() or "-"

        parts = [
            f"timestamp={timestamp}",
            f"level={record.levelname}",
            f"logger={record.name}",
            f"run_id={run_id}",
        ]

        message = record.getMessage()
        message = message.replace('"', '\\"')
        parts.append(f'message="{message}"')

        if record.exc_info:
            exc_text = self.formatException(record.exc_info)
            exc_text = exc_text.replace('\n', ' | ').replace('"', '\\"')
            parts.append(f'exception="{exc_text}"')

        return " ".join(parts)


# =============================================================================
# Logging Setup
# =============================================================================


def setup_logging(log_level: str = "INFO") -> None:
    """Configure structured logging on stderr.

    stdout is left free for the JSON result of the command-line tool.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR).
    """
    formatter = StructuredFormatter(
        datefmt="%Y-%m-%dT%H:%M:%S%z"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(log_level.upper())
    root_logger.addHandler(stderr_handler)


@contextmanager
def run_context(run_id: str | None = None) -> Iterator[str]:
    """Tag all log records emitted inside the block with a run ID.

    Args:
        run_id: Explicit run ID. A UUID4 is generated if omitted.

    Yields:
        The run ID in effect.
    """
    run_id = run_id or str(uuid.uuid4())
    token = run_id_var.set(run_id)
    try:
        yield run_id
    finally:
        run_id_var.reset(token)
