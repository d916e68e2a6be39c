"""TypesSettings — CLI flags, environment and ``commontypes.toml`` merged.

Precedence, highest first:

1. keyword arguments (the CLI's global flags, ``--now``)
2. ``COMMONTYPES_*`` environment variables, ``__`` for nested keys
   (``COMMONTYPES_CLOCK__OFFSET=+02:00``)
3. the TOML file chosen by :func:`~commontypes.config.discovery.locate_config`
4. defaults from :mod:`commontypes.config.models`

Sections merge key by key, so ``--now`` keeps the TOML ``[clock] offset``.
"""

from __future__ import annotations

import threading
import tomllib
from datetime import tzinfo
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from commontypes.config.discovery import ConfigSource, locate_config, read_toml
from commontypes.config.models import ClockConfig, OutputConfig
from commontypes.domain.clock import Clock, FixedClock, SystemClock
from commontypes.domain.zone import offset_zone

# The located TOML path, handed to ``settings_customise_sources`` while a
# settings object is being built on this thread.
_pending = threading.local()


class TomlFileSource(PydanticBaseSettingsSource):
    """Settings source backed by one ``commontypes.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._values: dict[str, Any] = self._read(path) if path else {}

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        try:
            return read_toml(path)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, field_name in self._values

    def __call__(self) -> dict[str, Any]:
        return dict(self._values)


class TypesSettings(BaseSettings):
    """Frozen settings for one CLI invocation.

    Attributes:
        config_path: The TOML file in effect, or None.
        config_source: Which lookup rule picked ``config_path``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "COMMONTYPES_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    config_source: ConfigSource = ConfigSource.NONE

    # Global output flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # TOML sections
    clock: ClockConfig = Field(default_factory=ClockConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # No dotenv or secrets directory.
        toml = TomlFileSource(settings_cls, getattr(_pending, "path", None))
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start_dir: Path | None = None,
        **overrides: Any,
    ) -> TypesSettings:
        """Locate the config file and build settings with *overrides* on top.

        An explicit *config_path* that does not exist leaves the settings
        on env vars and defaults.
        """
        path, source = locate_config(config_path, start_dir)
        _pending.path = path
        try:
            return cls(config_path=path, config_source=source, **overrides)
        finally:
            _pending.path = None

    def build_clock(self) -> Clock:
        """FixedClock at ``[clock] fixed_now`` when set, else the system clock."""
        pinned = self.clock.fixed_now
        return SystemClock() if pinned is None else FixedClock(pinned.to_datetime())

    @property
    def zone(self) -> tzinfo:
        """Zone deciding which calendar day is "today"."""
        return offset_zone(self.clock.offset)
