"""Plain-text file report sink."""

from __future__ import annotations

from pathlib import Path

from ..errors import SinkOpenFailure
from ..models import Diagnostic
from .base import ReportSink, format_problem


class TextFileSink(ReportSink):
    """Writes a plain-text report grouped by file, with a trailing summary."""

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        try:
            self._handle = path.open("w", encoding="utf-8")
        except OSError as exc:
            raise SinkOpenFailure(f"Cannot create report file: {path} ({exc.strerror or exc})") from exc
        self._header_written = False

    def _file_started(self, name: str) -> None:
        self._header_written = False

    def _write_problem(self, name: str, diagnostic: Diagnostic) -> None:
        if not self._header_written:
            self._handle.write(f"{name}\n")
            self._header_written = True
        self._handle.write(
            f"  line {diagnostic.line}, col {diagnostic.character}: {format_problem(diagnostic)}\n"
        )

    def _flush(self) -> None:
        self._handle.flush()

    def _close(self) -> None:
        try:
            self._handle.write(f"{self.summary()}\n")
        finally:
            self._handle.close()
