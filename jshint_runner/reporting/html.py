"""HTML file report sink rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from ..errors import SinkOpenFailure
from ..models import Diagnostic
from .base import ReportSink

TEMPLATES_DIR = Path(__file__).with_name("templates")
REPORT_TEMPLATE = "report.html.j2"


def _create_env() -> Environment:
    loader = FileSystemLoader(str(TEMPLATES_DIR))
    return Environment(loader=loader, autoescape=True, trim_blocks=True, lstrip_blocks=True)


class HtmlFileSink(ReportSink):
    """Writes one HTML document for the whole run.

    The document head is written when the sink opens, one section per file as
    files complete, and the closing markup on finalize.
    """

    def __init__(self, path: Path, *, title: str = "JSHint Report") -> None:
        super().__init__()
        self.path = path
        self._macros = _create_env().get_template(REPORT_TEMPLATE).module
        self._pending: List[Diagnostic] = []
        try:
            self._handle = path.open("w", encoding="utf-8")
        except OSError as exc:
            raise SinkOpenFailure(f"Cannot create report file: {path} ({exc.strerror or exc})") from exc
        self._write(self._macros.document_start(title))

    def _file_started(self, name: str) -> None:
        self._pending = []

    def _file_finished(self) -> None:
        if self.active_file is None:
            return
        self._write(self._macros.file_section(self.active_file, self._pending))
        self._pending = []
        self.active_file = None

    def _write_problem(self, name: str, diagnostic: Diagnostic) -> None:
        self._pending.append(diagnostic)

    def _flush(self) -> None:
        self._handle.flush()

    def _close(self) -> None:
        try:
            self._write(self._macros.document_end(self.summary(), self.files_seen))
        finally:
            self._handle.close()

    def _write(self, fragment: object) -> None:
        text = str(fragment).strip("\n")
        if text:
            self._handle.write(text + "\n")
