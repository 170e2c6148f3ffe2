"""Error taxonomy shared by the runner pipeline."""

from __future__ import annotations


class RunnerError(RuntimeError):
    """Base class for failures surfaced to the command line."""


class InvalidInput(RunnerError):
    """Raised when an explicit input path is missing or unreadable."""


class UnsupportedCharset(RunnerError):
    """Raised when the requested charset has no registered codec."""


class NoInputFiles(RunnerError):
    """Raised when input expansion produced no files to check."""


class EngineLoadFailure(RunnerError):
    """Raised when the lint engine cannot be loaded."""


class EngineCheckFailure(RunnerError):
    """Raised when the engine fails while checking a single file."""


class ConfigLoadFailure(RunnerError):
    """Raised when the configuration file cannot be read or parsed.

    The runner treats this as non-fatal and continues with empty settings.
    """


class SinkOpenFailure(RunnerError):
    """Raised when a report sink cannot open its output."""


class SinkCloseFailure(RunnerError):
    """Raised when a report sink fails while flushing or closing its output."""


class FileReadFailure(RunnerError):
    """Raised when a collected source file cannot be read."""


__all__ = [
    "ConfigLoadFailure",
    "EngineCheckFailure",
    "EngineLoadFailure",
    "FileReadFailure",
    "InvalidInput",
    "NoInputFiles",
    "RunnerError",
    "SinkCloseFailure",
    "SinkOpenFailure",
    "UnsupportedCharset",
]
