"""Command group: UTC instants (YYYY-MM-DDTHH:MM:SS+00:00)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from commontypes.commands._base import TypesGroup

if TYPE_CHECKING:
    from commontypes.commands._context import AppContext


@click.group(
    cls=TypesGroup,
    examples="""\
  commontypes instant parse 2020-01-12T11:22:33+02:00
  commontypes instant parse "2020-01-02 11:22:33.123456" --format "%Y-%m-%d %H:%M:%S.%f"
  commontypes instant parse "2020-01-02 11:22" --format "%Y-%m-%d %H:%M" --offset +01:00
  commontypes instant now
  commontypes instant shift 2020-11-12T11:22:33+00:00 "+1 day"
  commontypes instant end-of-day 2020-11-12T11:22:33+00:00""",
)
def instant() -> None:
    """Parse, normalize, and shift UTC instants."""


@instant.command()
@click.argument("value")
@click.option("--format", "pattern", default=None, help="strptime pattern (default: ATOM).")
@click.option(
    "--offset",
    default=None,
    help="Zone offset (±HH:MM) for --format input without an offset (default: UTC).",
)
@click.pass_obj
def parse(app: AppContext, value: str, pattern: str | None, offset: str | None) -> None:
    """Parse an instant and normalize it to UTC."""
    app.emit(
        app.service.parse(
            "instant",
            value,
            pattern=pattern,
            offset=offset,
            display_format=app.settings.output.instant_format,
        )
    )


@instant.command()
@click.pass_obj
def now(app: AppContext) -> None:
    """Show the current instant (honours --now and [clock] fixed_now)."""
    app.emit(app.service.now(display_format=app.settings.output.instant_format))


@instant.command("end-of-day")
@click.argument("value")
@click.pass_obj
def end_of_day(app: AppContext, value: str) -> None:
    """Show the last instant (23:59:59.999999) of VALUE's UTC day."""
    app.emit(app.service.end_of_day(value, display_format=app.settings.output.instant_format))


@instant.command()
@click.argument("value")
@click.argument("modifier")
@click.pass_obj
def shift(app: AppContext, value: str, modifier: str) -> None:
    """Apply MODIFIER to VALUE; use "--" before negative modifiers."""
    app.emit(
        app.service.shift(
            "instant", value, modifier, display_format=app.settings.output.instant_format
        )
    )
