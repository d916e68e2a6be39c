"""Shared pytest fixtures and test helpers for commontypes tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from commontypes.domain.clock import FixedClock, use_clock

# Monday of ISO week 2 of 2020.
MONDAY = datetime(2020, 1, 6, 10, 0, tzinfo=UTC)
WEDNESDAY = datetime(2020, 1, 8, 15, 30, tzinfo=UTC)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no config overrides.

    Keeps a ``commontypes.toml`` or ``COMMONTYPES_*`` variable on the
    developer's machine from leaking into the settings under test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("COMMONTYPES_CONFIG", raising=False)
    monkeypatch.delenv("COMMONTYPES_CLOCK__FIXED_NOW", raising=False)
    monkeypatch.delenv("COMMONTYPES_CLOCK__OFFSET", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Restore logger state changed by CLI invocations and logging tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("commontypes")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def monday_clock() -> FixedClock:
    """Clock pinned to Monday 2020-01-06T10:00:00Z."""
    return FixedClock(MONDAY)


@pytest.fixture
def wednesday_clock() -> FixedClock:
    """Clock pinned to Wednesday 2020-01-08T15:30:00Z."""
    return FixedClock(WEDNESDAY)


@pytest.fixture
def on_monday(monday_clock: FixedClock) -> Iterator[FixedClock]:
    """Install the Monday clock as the default clock for the test."""
    with use_clock(monday_clock) as clock:
        yield clock


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_config(directory: Path, content: str) -> Path:
    """Write a ``commontypes.toml`` into *directory* and return its path."""
    path = directory / "commontypes.toml"
    path.write_text(content, encoding="utf-8")
    return path
