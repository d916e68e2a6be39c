"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, commontypes.toml only contains
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from commontypes.domain.instant import Instant
from commontypes.domain.zone import offset_zone


class ClockConfig(BaseModel):
    """[clock] section."""

    model_config = {"frozen": True}

    # Canonical instant pinning "now" for every command; unset = system clock.
    fixed_now: Instant | None = None
    # Zone used to decide which calendar day "today" is.
    offset: str = "+00:00"

    @field_validator("offset")
    @classmethod
    def _check_offset(cls, value: str) -> str:
        offset_zone(value)
        return value


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    # Extra strftime rendering added to human output, e.g. "%A %d %B %Y".
    date_format: str | None = None
    instant_format: str | None = None

