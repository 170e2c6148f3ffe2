"""Configuration loading for jshint-runner (--config files)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

import yaml

from .errors import ConfigLoadFailure
from .logging import get_logger
from .models import EngineSettings

BLACKLIST_KEY = "blackList"

_YAML_SUFFIXES = {".yml", ".yaml", ".json"}
_PROPERTY_SEPARATORS = "=:"
_PROPERTY_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}

logger = get_logger("config")


def load_settings(config_path: Optional[Path]) -> EngineSettings:
    """Return blacklist and engine options for ``config_path``.

    A missing path yields empty settings. Read and parse failures are logged and
    also yield empty settings so the run can continue.
    """
    if config_path is None:
        return EngineSettings()
    try:
        data = read_config(config_path)
    except ConfigLoadFailure as exc:
        logger.error("%s; continuing without configuration", exc)
        return EngineSettings()
    return build_settings(data)


def read_config(config_path: Path) -> Dict[str, Any]:
    """Read ``config_path`` as YAML or as a properties file based on its suffix."""
    path = config_path.expanduser()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadFailure(f"Failed to read configuration {path}: {exc}") from exc

    if path.suffix.lower() in _YAML_SUFFIXES:
        return _parse_yaml(text, path)
    return parse_properties(text)


def build_settings(data: Dict[str, Any]) -> EngineSettings:
    """Split the reserved blacklist key from the engine options."""
    options = dict(data)
    blacklist: FrozenSet[str] = frozenset()
    if BLACKLIST_KEY in options:
        blacklist = frozenset(_as_name_list(options.pop(BLACKLIST_KEY)))
        logger.debug("Blacklisted %d file names", len(blacklist))
    return EngineSettings(blacklist=blacklist, options=options)


def _parse_yaml(text: str, path: Path) -> Dict[str, Any]:
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigLoadFailure(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigLoadFailure(f"{path.name} must contain a mapping at the root")
    return {str(key): value for key, value in loaded.items()}


def parse_properties(text: str) -> Dict[str, Any]:
    """Parse Java-style ``.properties`` text into a flat mapping."""
    result: Dict[str, Any] = {}
    for logical in _logical_lines(text.splitlines()):
        key, value = _split_property(logical)
        result[_unescape(key)] = _parse_scalar(_unescape(value))
    return result


def _logical_lines(lines: Iterable[str]) -> List[str]:
    logical: List[str] = []
    pending: Optional[str] = None
    for raw in lines:
        line = raw.lstrip()
        if pending is None:
            if not line or line[0] in "#!":
                continue
            current = line
        else:
            current = pending + line
        if _ends_with_continuation(current):
            pending = current[:-1]
            continue
        pending = None
        logical.append(current)
    if pending is not None:
        logical.append(pending)
    return logical


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_property(line: str) -> Tuple[str, str]:
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _PROPERTY_SEPARATORS or char.isspace():
            break
        index += 1
    key = line[:index]
    rest = line[index:].lstrip()
    if rest and rest[0] in _PROPERTY_SEPARATORS:
        rest = rest[1:].lstrip()
    return key, rest


def _unescape(value: str) -> str:
    if "\\" not in value:
        return value
    chars: List[str] = []
    index = 0
    while index < len(value):
        char = value[index]
        if char != "\\" or index + 1 >= len(value):
            chars.append(char)
            index += 1
            continue
        nxt = value[index + 1]
        if nxt == "u" and index + 6 <= len(value):
            try:
                chars.append(chr(int(value[index + 2 : index + 6], 16)))
                index += 6
                continue
            except ValueError:
                pass
        chars.append(_PROPERTY_ESCAPES.get(nxt, nxt))
        index += 2
    return "".join(chars)


def _parse_scalar(value: str) -> Any:
    lower = value.lower()
    if lower == "true":
        return True
    if lower == "false":
        return False
    try:
        if "." in value or "e" in lower:
            return float(value)
        return int(value)
    except ValueError:
        return value


def _as_name_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple, set)):
        names: List[str] = []
        for item in value:
            if isinstance(item, str):
                names.extend(item.split())
            elif item is not None:
                names.append(str(item))
        return names
    return [str(value)]


__all__ = ["BLACKLIST_KEY", "build_settings", "load_settings", "parse_properties", "read_config"]
