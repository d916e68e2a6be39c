"""Locating and reading ``commontypes.toml``.

Lookup order: an explicit path (``--config``), then the file named by
``COMMONTYPES_CONFIG``, then the nearest ``commontypes.toml`` found by
walking up from the working directory. A named file that does not exist
means "no config file"; the search does not fall through.
"""

from __future__ import annotations

import os
import tomllib
from enum import StrEnum
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "commontypes.toml"
CONFIG_ENV_VAR = "COMMONTYPES_CONFIG"


class ConfigSource(StrEnum):
    """Where the config file in effect came from."""

    FLAG = "flag"
    ENV = "env"
    WALK_UP = "walk-up"
    NONE = "none"


def _existing(path: Path) -> Path | None:
    return path if path.is_file() else None


def _walk_up(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def locate_config(
    explicit: str | Path | None = None, start: Path | None = None
) -> tuple[Path | None, ConfigSource]:
    """Resolve the config file and report which rule selected it."""
    if explicit:
        found = _existing(Path(explicit))
        return found, ConfigSource.FLAG if found else ConfigSource.NONE

    named = os.environ.get(CONFIG_ENV_VAR)
    if named:
        found = _existing(Path(named))
        return found, ConfigSource.ENV if found else ConfigSource.NONE

    found = _walk_up((start or Path.cwd()).resolve())
    return found, ConfigSource.WALK_UP if found else ConfigSource.NONE


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; raises ``tomllib.TOMLDecodeError`` on bad syntax."""
    with path.open("rb") as fh:
        return tomllib.load(fh)
