"""Command: show the effective configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from commontypes.commands._base import TypesCommand
from commontypes.services.result import ServiceResult

if TYPE_CHECKING:
    from commontypes.commands._context import AppContext


@click.command("config", cls=TypesCommand)
@click.pass_obj
def config_cmd(app: AppContext) -> None:
    """Show the merged settings (flags > env > commontypes.toml > defaults)."""
    settings = app.settings
    data = settings.model_dump(mode="json", include={"clock", "output"})
    data["config_path"] = str(settings.config_path) if settings.config_path else None
    data["config_source"] = settings.config_source.value
    app.emit(ServiceResult.success("config", data))
