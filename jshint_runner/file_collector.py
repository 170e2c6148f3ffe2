"""Input expansion: turns command line paths into the list of files to check."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Set

from .errors import InvalidInput, NoInputFiles
from .logging import get_logger

SOURCE_SUFFIX = ".js"


def _is_readable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


def _check_file(path: Path) -> None:
    absolute = path.absolute()
    if not path.is_file():
        raise InvalidInput(f"No such file: {absolute}")
    if not os.access(path, os.R_OK):
        raise InvalidInput(f"Cannot read file: {absolute}")


def _iter_sources(directory: Path, suffix: str, visited: Set[Path]) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(directory, followlinks=True):
        real_dir = Path(dirpath).resolve()
        if real_dir in visited:
            # Symlinked back into a tree that was already walked.
            dirnames[:] = []
            continue
        visited.add(real_dir)

        dirnames.sort()
        current_dir = Path(dirpath)
        for filename in sorted(filenames):
            if not filename.endswith(suffix):
                continue
            candidate = current_dir / filename
            if _is_readable_file(candidate):
                yield candidate


class FileCollector:
    """Expands files and directories into a deduplicated, ordered file set."""

    def __init__(self, suffix: str = SOURCE_SUFFIX) -> None:
        self.suffix = suffix
        self.logger = get_logger("collector")

    def collect(self, inputs: Iterable[str]) -> List[Path]:
        """Return the files to check for ``inputs``.

        Directories are searched recursively for files ending in the source suffix;
        explicit files are kept regardless of suffix but must exist and be readable.
        """
        files: List[Path] = []
        seen: Set[Path] = set()
        visited: Set[Path] = set()

        def _add(path: Path) -> None:
            key = Path(os.path.abspath(path))
            if key in seen:
                return
            seen.add(key)
            files.append(path)

        for raw in inputs:
            path = Path(raw).expanduser()
            if path.is_dir():
                before = len(files)
                for candidate in _iter_sources(path, self.suffix, visited):
                    _add(candidate)
                self.logger.debug("Collected %d files from %s", len(files) - before, path)
            else:
                _check_file(path)
                _add(path)

        if not files:
            raise NoInputFiles("No input files")
        return files


__all__ = ["FileCollector", "SOURCE_SUFFIX"]
