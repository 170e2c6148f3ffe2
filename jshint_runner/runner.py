"""Pipeline orchestration for a single lint run."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .config import load_settings
from .engine import Engine, JSHintEngine
from .errors import EngineCheckFailure, FileReadFailure, SinkCloseFailure, UnsupportedCharset
from .file_collector import FileCollector
from .logging import get_logger
from .models import Diagnostic, EngineSettings, RunConfig, RunSummary, Severity
from .reporting import ReportSink, build_sinks

SinkFactory = Callable[[Optional[Path]], List[ReportSink]]


def ensure_charset(name: str) -> str:
    """Return the canonical codec name for ``name`` or raise UnsupportedCharset."""
    try:
        info = codecs.lookup(name)
        # Rejects non-text codecs such as base64 or rot13.
        b"".decode(info.name)
    except LookupError as exc:
        raise UnsupportedCharset(f"Unknown or unsupported charset: {name}") from exc
    return info.name


def read_source(path: Path, encoding: str) -> str:
    """Read ``path`` as text with newlines normalised to ``\\n``."""
    try:
        with path.open("r", encoding=encoding, errors="replace", newline=None) as handle:
            text = handle.read()
    except OSError as exc:
        raise FileReadFailure(f"Cannot read file: {path.absolute()} ({exc.strerror or exc})") from exc
    if text and not text.endswith("\n"):
        text += "\n"
    return text


class _CountingHandler:
    """Tallies diagnostics pushed by the engine for the run summary."""

    def __init__(self, summary: RunSummary) -> None:
        self.summary = summary

    def handle(self, diagnostic: Diagnostic) -> None:
        self.summary.problems += 1
        if diagnostic.severity is Severity.ERROR:
            self.summary.errors += 1


class Runner:
    """Coordinates collection, configuration, engine checks and reporting."""

    def __init__(
        self,
        engine: Engine | None = None,
        collector: FileCollector | None = None,
        sink_factory: SinkFactory | None = None,
    ) -> None:
        self.engine = engine or JSHintEngine()
        self.collector = collector or FileCollector()
        self.sink_factory = sink_factory or build_sinks
        self.logger = get_logger("runner")

    def run(self, config: RunConfig) -> RunSummary:
        """Execute one run; fatal setup problems raise ``RunnerError`` subclasses."""
        encoding = ensure_charset(config.charset)
        files = self.collector.collect(config.input_paths)
        self.logger.debug("Collected %d input files", len(files))

        self.engine.load(config.custom_engine)
        settings = load_settings(config.config_file)
        self.engine.configure(settings.options)

        sinks = self.sink_factory(config.output_file)
        summary = RunSummary()
        close_error: Optional[OSError] = None
        try:
            self._process_files(files, encoding, settings, sinks, summary)
        finally:
            close_error = self._finalize(sinks)
        if close_error is not None:
            raise SinkCloseFailure(f"Failed to write report: {close_error}") from close_error

        self.logger.info(
            "Checked %d files: %d problems (%d errors), %d skipped, %d failed",
            summary.files_checked,
            summary.problems,
            summary.errors,
            summary.files_skipped,
            summary.files_failed,
        )
        return summary

    def _process_files(
        self,
        files: Sequence[Path],
        encoding: str,
        settings: EngineSettings,
        sinks: Sequence[ReportSink],
        summary: RunSummary,
    ) -> None:
        handlers = [*sinks, _CountingHandler(summary)]
        for path in files:
            if path.name in settings.blacklist:
                self.logger.debug("Skipping blacklisted file %s", path)
                summary.files_skipped += 1
                continue

            for sink in sinks:
                sink.set_active_file(path.name)
            try:
                source = read_source(path, encoding)
                self.engine.check(source, handlers)
            except (FileReadFailure, EngineCheckFailure) as exc:
                self.logger.error("%s: %s", path, exc)
                summary.files_failed += 1
                failure = Diagnostic.failure(str(exc))
                for handler in handlers:
                    handler.handle(failure)
                continue
            summary.files_checked += 1

    def _finalize(self, sinks: Sequence[ReportSink]) -> Optional[OSError]:
        """Finalize every sink in chain order and return the first OSError, if any."""
        first_error: Optional[OSError] = None
        for sink in sinks:
            try:
                sink.finalize()
            except OSError as exc:
                self.logger.error("Failed to finalize %s: %s", sink.__class__.__name__, exc)
                if first_error is None:
                    first_error = exc
        return first_error


__all__ = ["Runner", "ensure_charset", "read_source"]
