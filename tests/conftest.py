from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.fake_engine import FakeEngine
from tests._fixtures.tree_builder import SourceTreeBuilder


@pytest.fixture
def tree_builder(tmp_path: Path) -> SourceTreeBuilder:
    """Provide a reusable source tree builder rooted at the pytest tmp_path."""
    return SourceTreeBuilder(tmp_path)


@pytest.fixture
def fake_engine() -> FakeEngine:
    """Provide a fresh deterministic engine double."""
    return FakeEngine()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers added by configure_logging so they never outlive captured streams."""
    yield
    logger = logging.getLogger("jshint_runner")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
