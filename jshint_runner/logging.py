"""Logging utilities for jshint-runner."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "jshint_runner"
_STREAM_PREFIX = "[jshint-runner]"


class _ComponentFormatter(logging.Formatter):
    """Console formatter that names the emitting component in verbose mode.

    ``jshint_runner.runner`` is shown as ``runner``; records from the package
    root carry no component.
    """

    def __init__(self, *, verbose: bool = False) -> None:
        super().__init__()
        self.verbose = verbose

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        prefix = f"{_LOGGER_NAME}."
        component = record.name[len(prefix) :] if record.name.startswith(prefix) else ""
        if self.verbose and component:
            return f"{_STREAM_PREFIX} {record.levelname} {component}: {message}"
        return f"{_STREAM_PREFIX} {record.levelname} {message}"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the jshint_runner hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route jshint_runner records to stderr and, when given, to ``log_file``.

    Verbose runs log at DEBUG and tag console lines with the component name.
    The log file always records timestamps and full logger names.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(_ComponentFormatter(verbose=verbose))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
