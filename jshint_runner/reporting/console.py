"""Console report sink."""

from __future__ import annotations

import sys
from typing import TextIO

from ..models import Diagnostic
from .base import ReportSink, format_problem


class ConsoleSink(ReportSink):
    """Prints one line per diagnostic to stdout (or the given stream)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self.stream = stream if stream is not None else sys.stdout

    def _write_problem(self, name: str, diagnostic: Diagnostic) -> None:
        print(
            f"{name}:{diagnostic.line}:{diagnostic.character}: {format_problem(diagnostic)}",
            file=self.stream,
        )

    def _flush(self) -> None:
        self.stream.flush()

    def _close(self) -> None:
        # The stream belongs to the caller.
        self._flush()
