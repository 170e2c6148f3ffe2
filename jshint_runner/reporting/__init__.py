"""Report sinks and sink chain construction."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, TextIO

from .base import ReportSink, format_problem
from .console import ConsoleSink
from .html import HtmlFileSink
from .text import TextFileSink

_HTML_SUFFIXES = (".html", ".htm")


def build_sinks(output_file: Optional[Path] = None, *, stream: TextIO | None = None) -> List[ReportSink]:
    """Return the sink chain: console first, then at most one file sink.

    The file sink is chosen from the output suffix (``.html``/``.htm`` for HTML,
    plain text otherwise).
    """
    sinks: List[ReportSink] = [ConsoleSink(stream)]
    if output_file is not None:
        if output_file.name.lower().endswith(_HTML_SUFFIXES):
            sinks.append(HtmlFileSink(output_file))
        else:
            sinks.append(TextFileSink(output_file))
    return sinks


__all__ = [
    "ConsoleSink",
    "HtmlFileSink",
    "ReportSink",
    "TextFileSink",
    "build_sinks",
    "format_problem",
]
