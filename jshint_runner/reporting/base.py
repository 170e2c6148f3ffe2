"""Base class for report sinks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..models import Diagnostic


def format_problem(diagnostic: Diagnostic) -> str:
    """Return ``severity [code] message`` for a diagnostic."""
    code = f" [{diagnostic.code}]" if diagnostic.code else ""
    return f"{diagnostic.severity.value}{code} {diagnostic.message}"


class ReportSink(ABC):
    """Receives diagnostics for the active file and owns one output resource.

    ``finalize`` releases the resource; calling it again is a no-op.
    """

    def __init__(self) -> None:
        self.active_file: Optional[str] = None
        self.problems = 0
        self.files_seen = 0
        self.files_with_problems = 0
        self._active_has_problems = False
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    def set_active_file(self, name: str) -> None:
        """Attribute subsequent diagnostics to ``name``."""
        self._check_open()
        self._file_finished()
        self.active_file = name
        self.files_seen += 1
        self._active_has_problems = False
        self._file_started(name)

    def handle(self, diagnostic: Diagnostic) -> None:
        """Record one diagnostic for the active file."""
        self._check_open()
        self.problems += 1
        if not self._active_has_problems:
            self._active_has_problems = True
            self.files_with_problems += 1
        self._write_problem(self.active_file or "<unknown>", diagnostic)

    def finalize(self) -> None:
        """Flush pending output and release the sink's resource."""
        if self._finalized:
            return
        self._finalized = True
        try:
            self._file_finished()
        finally:
            self._close()

    def flush(self) -> None:
        """Push buffered output to the underlying resource."""
        self._check_open()
        self._flush()

    def summary(self) -> str:
        noun = "problem" if self.problems == 1 else "problems"
        files = "file" if self.files_with_problems == 1 else "files"
        return f"{self.problems} {noun} in {self.files_with_problems} {files}"

    def _check_open(self) -> None:
        if self._finalized:
            raise RuntimeError(f"{self.__class__.__name__} has already been finalized")

    def _file_started(self, name: str) -> None:
        """Hook invoked when a new active file is set."""

    def _file_finished(self) -> None:
        """Hook invoked before switching files and on finalize."""

    def _flush(self) -> None:
        """Hook that flushes the output; sinks without buffers keep the default."""

    @abstractmethod
    def _write_problem(self, name: str, diagnostic: Diagnostic) -> None:
        """Write a single diagnostic for ``name``."""

    @abstractmethod
    def _close(self) -> None:
        """Release the underlying output."""
