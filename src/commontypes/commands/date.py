"""Command group: calendar dates (YYYY-MM-DD)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from commontypes.commands._base import TypesCommand, TypesGroup

if TYPE_CHECKING:
    from commontypes.commands._context import AppContext

WEEKDAY_NAMES = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


@click.group(
    cls=TypesGroup,
    examples="""\
  commontypes date parse 2020-01-12
  commontypes date parse 12/01/2020 --format %d/%m/%Y
  commontypes date today --offset +02:00
  commontypes date last monday
  commontypes date shift 2020-01-31 "+1 month"
  commontypes date this-week friday""",
)
def date() -> None:
    """Parse, resolve, and shift calendar dates."""


@date.command()
@click.argument("value")
@click.option("--format", "pattern", default=None, help="strptime pattern (default: YYYY-MM-DD).")
@click.pass_obj
def parse(app: AppContext, value: str, pattern: str | None) -> None:
    """Parse and inspect a date."""
    app.emit(
        app.service.parse(
            "date", value, pattern=pattern, display_format=app.settings.output.date_format
        )
    )


def _relative_command(which: str) -> click.Command:
    @click.command(cls=TypesCommand, name=which, help=f"Resolve {which}'s date.")
    @click.option("--offset", default=None, help="Zone offset (±HH:MM) deciding the current day.")
    @click.pass_obj
    def command(app: AppContext, offset: str | None) -> None:
        app.emit(
            app.service.relative_day(
                "date", which, offset=offset, display_format=app.settings.output.date_format
            )
        )

    return command


for _which in ("today", "yesterday", "tomorrow"):
    date.add_command(_relative_command(_which))


@date.command("this-week")
@click.argument("weekday", type=click.Choice(WEEKDAY_NAMES, case_sensitive=False))
@click.pass_obj
def this_week(app: AppContext, weekday: str) -> None:
    """Resolve WEEKDAY within the current Monday-Sunday week."""
    app.emit(
        app.service.weekday(
            "date", weekday, mode="this_week", display_format=app.settings.output.date_format
        )
    )


@date.command()
@click.argument("weekday", type=click.Choice(WEEKDAY_NAMES, case_sensitive=False))
@click.pass_obj
def last(app: AppContext, weekday: str) -> None:
    """Resolve the last WEEKDAY strictly before today."""
    app.emit(
        app.service.weekday(
            "date", weekday, mode="last", display_format=app.settings.output.date_format
        )
    )


@date.command()
@click.argument("value")
@click.argument("modifier")
@click.pass_obj
def shift(app: AppContext, value: str, modifier: str) -> None:
    """Apply MODIFIER ("+1 day", "previous monday", ...) to VALUE."""
    app.emit(
        app.service.shift("date", value, modifier, display_format=app.settings.output.date_format)
    )
