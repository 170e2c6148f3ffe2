"""JSHint engine adapter executed through Node.js."""

from __future__ import annotations

import json
import os
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from ..errors import EngineCheckFailure, EngineLoadFailure
from ..logging import get_logger
from ..models import Diagnostic, Severity
from .base import DiagnosticHandler, Engine

DRIVER_PATH = Path(__file__).with_name("driver.js")


@dataclass
class EngineRequest:
    """A single invocation of the Node.js driver."""

    node: str
    library: Optional[Path]
    payload: Dict[str, Any] = field(default_factory=dict)


class JSHintEngine(Engine):
    """Runs JSHint in a Node.js subprocess, one process per checked file."""

    ENV_NODE_KEYS = ("JSHINT_RUNNER_NODE",)

    def __init__(
        self,
        node: str | None = None,
        *,
        runner: Callable[[EngineRequest], Dict[str, Any]] | None = None,
    ) -> None:
        self.node = node
        self._runner = runner or self._subprocess_runner
        self._library: Optional[Path] = None
        self._options: Dict[str, Any] = {}
        self._loaded = False
        self.logger = get_logger("engine")

    def load(self, custom_source: Optional[Path] = None) -> None:
        library = None
        if custom_source is not None:
            library = custom_source.expanduser().resolve()
            try:
                with library.open("rb") as handle:
                    if not handle.read(1):
                        raise EngineLoadFailure(
                            f"Failed to load JSHint library: {library} is empty"
                        )
            except OSError as exc:
                raise EngineLoadFailure(f"Failed to load JSHint library: {exc}") from exc

        self.node = self._resolve_node(self.node)
        self._library = library
        try:
            response = self._runner(self._request({"versionOnly": True}))
        except EngineCheckFailure as exc:
            raise EngineLoadFailure(f"Failed to load JSHint library: {exc}") from exc
        self._loaded = True
        self.logger.debug(
            "Loaded JSHint %s from %s",
            response.get("version", "unknown"),
            library or "the default package",
        )

    def configure(self, options: Mapping[str, Any]) -> None:
        self._options = dict(options)
        if self._options:
            self.logger.debug("Configured JSHint options: %s", ", ".join(sorted(self._options)))

    def check(self, source: str, handlers: Iterable[DiagnosticHandler]) -> int:
        if not self._loaded:
            raise RuntimeError("JSHint engine must be loaded before checking files")
        response = self._runner(self._request({"source": source, "options": self._options}))
        diagnostics = self._to_diagnostics(response.get("errors"))
        targets = list(handlers)
        for diagnostic in diagnostics:
            for handler in targets:
                handler.handle(diagnostic)
        return len(diagnostics)

    def _request(self, payload: Dict[str, Any]) -> EngineRequest:
        return EngineRequest(node=self.node or "node", library=self._library, payload=payload)

    @staticmethod
    def _subprocess_runner(request: EngineRequest) -> Dict[str, Any]:
        args = [request.node, str(DRIVER_PATH)]
        if request.library is not None:
            args.append(str(request.library))
        try:
            completed = subprocess.run(
                args,
                input=json.dumps(request.payload),
                check=True,
                capture_output=True,
                text=True,
                encoding="utf-8",
            )
        except FileNotFoundError as exc:
            raise EngineCheckFailure(
                f"Unable to locate '{request.node}'. Install Node.js or set JSHINT_RUNNER_NODE."
            ) from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip().splitlines()
            message = detail[0] if detail else f"exit code {exc.returncode}"
            raise EngineCheckFailure(f"JSHint driver failed: {message}") from exc

        try:
            payload = json.loads(completed.stdout)
        except json.JSONDecodeError as exc:
            raise EngineCheckFailure("JSHint driver returned invalid JSON") from exc
        if not isinstance(payload, dict):
            raise EngineCheckFailure("JSHint driver returned an unexpected payload")
        return payload

    @staticmethod
    def _to_diagnostics(errors: Any) -> List[Diagnostic]:
        if not isinstance(errors, list):
            return []
        diagnostics: List[Diagnostic] = []
        for error in errors:
            # JSHint leaves null entries in its error list after fatal errors.
            if not isinstance(error, dict):
                continue
            code = error.get("code") if isinstance(error.get("code"), str) else None
            evidence = error.get("evidence") if isinstance(error.get("evidence"), str) else None
            diagnostics.append(
                Diagnostic(
                    line=_as_int(error.get("line")),
                    character=_as_int(error.get("character")),
                    message=str(error.get("reason") or ""),
                    code=code,
                    severity=Severity.from_code(code),
                    evidence=evidence,
                )
            )
        return diagnostics

    def _resolve_node(self, node: str | None) -> str:
        if node:
            return node
        env_value = self._first_env_value(self.ENV_NODE_KEYS)
        if env_value:
            return env_value
        located = shutil.which("node") or shutil.which("nodejs")
        if located is None:
            raise EngineLoadFailure(
                "Failed to load JSHint library: Node.js executable not found on PATH"
            )
        return located

    @staticmethod
    def _first_env_value(keys: Sequence[str]) -> str | None:
        for key in keys:
            value = os.getenv(key)
            if value:
                return value
        return None


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    return 0


__all__ = ["DRIVER_PATH", "EngineRequest", "JSHintEngine"]
