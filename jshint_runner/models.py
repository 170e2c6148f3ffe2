"""Core data models shared across jshint-runner components."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Tuple

DEFAULT_CHARSET = "UTF-8"


@dataclass(frozen=True)
class RunConfig:
    """Settings for a single run, built once from the command line."""

    input_paths: Tuple[str, ...]
    charset: str = DEFAULT_CHARSET
    custom_engine: Optional[Path] = None
    config_file: Optional[Path] = None
    output_file: Optional[Path] = None
    verbose: bool = False


class Severity(str, Enum):
    """Diagnostic severity derived from the engine's message code."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @classmethod
    def from_code(cls, code: Optional[str]) -> "Severity":
        if code:
            prefix = code[0].upper()
            if prefix == "E":
                return cls.ERROR
            if prefix == "I":
                return cls.INFO
        return cls.WARNING


@dataclass(frozen=True)
class Diagnostic:
    """One problem reported by the engine for the file currently being checked."""

    line: int
    character: int
    message: str
    code: Optional[str] = None
    severity: Severity = Severity.WARNING
    evidence: Optional[str] = None

    @classmethod
    def failure(cls, message: str) -> "Diagnostic":
        """Return a diagnostic describing a file that could not be checked."""
        return cls(line=0, character=0, message=message, code="E000", severity=Severity.ERROR)


@dataclass
class EngineSettings:
    """Blacklist and engine options derived from the configuration file."""

    blacklist: FrozenSet[str] = frozenset()
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RunSummary:
    """Counters describing the outcome of a run."""

    files_checked: int = 0
    files_skipped: int = 0
    files_failed: int = 0
    problems: int = 0
    errors: int = 0

    @property
    def clean(self) -> bool:
        return self.problems == 0 and self.files_failed == 0
