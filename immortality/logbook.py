"""
immortality/logbook.py - Logging Facade

Two write paths into the same append-only log file:
  - log_to_file(): mirror to stdout, then open/append/close the file
  - info()/severe(): templated messages through a logging.Logger whose
    FileHandler stays open for the life of the context

The context is built once per run and handed to whatever needs it.
All I/O failures are reported to stderr and swallowed; logging never stops
the simulation.
"""

from __future__ import annotations

import itertools
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

import click

from .constants import (
    LOG_FILE_PATH,
    LEVEL_INFO,
    LEVEL_SEVERE,
    TIMESTAMP_DATE_FORMAT,
    TIMESTAMP_TIME_FORMAT,
    MSG_SETUP_FAILED,
    MSG_WRITE_FAILED,
)

_context_ids = itertools.count(1)


# =============================================================================
# FORMATTING
# =============================================================================

def _render(value: Any) -> str:
    # Integers get thousands grouping; everything else renders as str()
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value:,}"
    return str(value)


def format_message(pattern: str, *args: Any) -> str:
    """
    Substitute {0}, {1}, ... in pattern with args, positionally.

    Args:
        pattern: Template with positional placeholders
        *args: Values; ints render with thousands separators

    Returns:
        str: Formatted message (pattern unchanged when no args are given)
    """
    if not args:
        return pattern
    return pattern.format(*(_render(a) for a in args))


def level_label(levelno: int) -> str:
    if levelno >= logging.ERROR:
        return LEVEL_SEVERE
    if levelno == logging.INFO:
        return LEVEL_INFO
    return logging.getLevelName(levelno)


def format_record(record: logging.LogRecord) -> str:
    """
    Render a record as "Aug 22, 2025 3:04:05 PM - INFO: message".

    Args:
        record: LogRecord to render

    Returns:
        str: Single line, no terminator (the handler appends it)
    """
    stamp = datetime.fromtimestamp(record.created)
    date = stamp.strftime(TIMESTAMP_DATE_FORMAT)
    clock = stamp.strftime(TIMESTAMP_TIME_FORMAT).lstrip("0")
    return f"{date} {clock} - {level_label(record.levelno)}: {record.getMessage()}"


class SingleLineFormatter(logging.Formatter):
    """Formatter that delegates to format_record()."""

    def format(self, record: logging.LogRecord) -> str:
        return format_record(record)


# =============================================================================
# LOG CONTEXT
# =============================================================================

class LogContext:
    """
    Logging state for one experiment run.

    Args:
        path: Log file, opened in append mode by both write paths
    """

    def __init__(self, path: Union[str, Path] = LOG_FILE_PATH):
        self.path = Path(path)
        self.logger = logging.getLogger(f"immortality.run.{next(_context_ids)}")
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False
        # Keeps the lastResort stderr handler out when the file handler is missing
        self.logger.addHandler(logging.NullHandler())
        self._handler: Optional[logging.FileHandler] = None
        self._setup_done = False

    @property
    def handler_installed(self) -> bool:
        return self._handler is not None

    def setup(self) -> None:
        """Install the append-mode file handler. Runs once; later calls are no-ops."""
        if self._setup_done:
            return
        self._setup_done = True
        try:
            handler = logging.FileHandler(self.path, mode="a", encoding="utf-8")
        except OSError as e:
            click.echo(format_message(MSG_SETUP_FAILED, e), err=True)
            return
        handler.setFormatter(SingleLineFormatter())
        self.logger.addHandler(handler)
        self._handler = handler

    def log_to_file(self, message: str) -> None:
        """Echo message to stdout, then append it as one line to the log file."""
        click.echo(message)
        try:
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(message + "\n")
        except OSError as e:
            click.echo(format_message(MSG_WRITE_FAILED, e), err=True)
            if self.handler_installed:
                self.severe(str(e))

    def info(self, pattern: str, *args: Any) -> None:
        self.logger.info(format_message(pattern, *args))

    def severe(self, pattern: str, *args: Any) -> None:
        self.logger.error(format_message(pattern, *args))

    def close(self) -> None:
        """Detach and close the file handler."""
        if self._handler is None:
            return
        self.logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = None

    def __enter__(self) -> "LogContext":
        self.setup()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
