"""Contract between the runner and the lint engine."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Protocol

from ..models import Diagnostic


class DiagnosticHandler(Protocol):
    """Anything that accepts diagnostics pushed by an engine."""

    def handle(self, diagnostic: Diagnostic) -> None:
        """Receive one diagnostic for the active file."""


class Engine(ABC):
    """Lint engine loaded once per run, configured once, then asked to check files."""

    @abstractmethod
    def load(self, custom_source: Optional[Path] = None) -> None:
        """Load the bundled engine, or the implementation at ``custom_source``."""

    @abstractmethod
    def configure(self, options: Mapping[str, Any]) -> None:
        """Apply engine options for the remainder of the run."""

    @abstractmethod
    def check(self, source: str, handlers: Iterable[DiagnosticHandler]) -> int:
        """Check ``source`` and push every diagnostic to each handler.

        Returns the number of diagnostics found.
        """
