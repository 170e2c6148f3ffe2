"""Tests for jshint_runner.file_collector."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from jshint_runner.errors import InvalidInput, NoInputFiles
from jshint_runner.file_collector import FileCollector


def _write(path: Path, content: str = "var a = 1;\n") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_collect_expands_directories_recursively(tree_builder) -> None:
    tree_builder.write(
        {
            "app.js": "var app;\n",
            "lib/util.js": "var util;\n",
            "lib/deep/er/still.js": "var still;\n",
            "lib/readme.md": "# notes\n",
            "styles/site.css": "body {}\n",
            "lib/data.json": "{}\n",
        }
    )

    files = tree_builder.collect()

    assert sorted(tree_builder.relative(files)) == [
        "app.js",
        "lib/deep/er/still.js",
        "lib/util.js",
    ]


def test_collect_keeps_explicit_files_regardless_of_suffix(tmp_path: Path) -> None:
    script = tmp_path / "build.jsx"
    _write(script)

    files = FileCollector().collect([str(script)])

    assert files == [script]


def test_collect_rejects_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.js"

    with pytest.raises(InvalidInput) as excinfo:
        FileCollector().collect([str(missing)])

    assert str(missing.absolute()) in str(excinfo.value)
    assert str(excinfo.value).startswith("No such file:")


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)
def test_collect_rejects_unreadable_file(tmp_path: Path) -> None:
    locked = tmp_path / "locked.js"
    _write(locked)
    locked.chmod(0)
    try:
        with pytest.raises(InvalidInput) as excinfo:
            FileCollector().collect([str(locked)])
    finally:
        locked.chmod(0o644)

    assert str(excinfo.value) == f"Cannot read file: {locked.absolute()}"


def test_collect_deduplicates_by_absolute_path(tree_builder) -> None:
    tree_builder.write({"a.js": "var a;\n", "nested/b.js": "var b;\n"})
    root = tree_builder.path()

    files = FileCollector().collect(
        [str(root / "a.js"), str(root), str(root / "nested" / ".." / "a.js")]
    )

    assert tree_builder.relative(files) == ["a.js", "nested/b.js"]


def test_collect_preserves_input_order(tmp_path: Path) -> None:
    first = tmp_path / "z.js"
    second = tmp_path / "a.js"
    _write(first)
    _write(second)

    files = FileCollector().collect([str(first), str(second)])

    assert files == [first, second]


def test_collect_requires_at_least_one_file(tree_builder) -> None:
    tree_builder.write({"notes.txt": "nothing to lint\n"})

    with pytest.raises(NoInputFiles):
        tree_builder.collect()


def test_collect_requires_inputs() -> None:
    with pytest.raises(NoInputFiles, match="No input files"):
        FileCollector().collect([])


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_collect_terminates_on_symlink_cycles(tree_builder) -> None:
    tree_builder.write({"pkg/index.js": "var index;\n"})
    loop = tree_builder.path("pkg/loop")
    try:
        loop.symlink_to(tree_builder.path(), target_is_directory=True)
    except OSError:  # pragma: no cover - platform without symlink privileges
        pytest.skip("cannot create symlinks")

    files = tree_builder.collect()

    assert tree_builder.relative(files) == ["pkg/index.js"]


def test_collect_is_deterministic(tree_builder) -> None:
    tree_builder.write({name: "var x;\n" for name in ("c.js", "a.js", "b/d.js", "b/a.js")})

    first = tree_builder.collect()
    second = tree_builder.collect()

    assert first == second
    assert tree_builder.relative(first) == ["a.js", "c.js", "b/a.js", "b/d.js"]
