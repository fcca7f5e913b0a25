"""Global test configuration — shared fixtures and safety guards.

This conftest provides:

1. **Logger isolation** — the CLI raises the ``slugkit`` logger level and
   may attach file handlers; an autouse fixture restores both after every
   test so one test's logging setup never leaks into the next.

2. **Deterministic randomness** — ``rng`` is a seeded
   :class:`random.Random` for tests that need reproducible suffixes.

3. **Settings factory** — ``write_settings`` writes TOML content to a
   per-test ``settings.toml`` and returns its path.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import pytest

from slugkit.logging import stderr_handler
from slugkit.logging import logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolate_logger() -> Iterator[None]:
    """Snapshot the slugkit logger and restore it after the test."""
    handlers = list(logger.handlers)
    level = logger.level
    handler_level = stderr_handler.level
    yield
    for extra in [h for h in logger.handlers if h not in handlers]:
        logger.removeHandler(extra)
        extra.close()
    logger.setLevel(level)
    stderr_handler.setLevel(handler_level)


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so suffix-dependent assertions are reproducible."""
    return random.Random(20240229)


@pytest.fixture
def write_settings(tmp_path: Path) -> Callable[[str], Path]:
    """Factory fixture — writes TOML content and returns the file path."""

    def _write(content: str) -> Path:
        path = tmp_path / "settings.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
