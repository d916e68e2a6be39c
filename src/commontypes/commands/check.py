"""Command: validate a raw value against a value type."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from commontypes.commands._base import TypesCommand

if TYPE_CHECKING:
    from commontypes.commands._context import AppContext

KINDS = ["date", "instant", "age", "count", "duration"]


@click.command(
    cls=TypesCommand,
    examples="""\
  commontypes check date 2020-02-29
  commontypes check instant 2020-01-12T11:22:33+02:00
  commontypes check age 42
  commontypes --quiet check date 2021-02-29""",
)
@click.argument("kind", type=click.Choice(KINDS, case_sensitive=False))
@click.argument("value")
@click.option("--strict", is_flag=True, help="Exit with code 1 when the value is invalid.")
@click.pass_obj
def check(app: AppContext, kind: str, value: str, strict: bool) -> None:
    """Report whether VALUE is a valid KIND."""
    result = app.service.check(kind.lower(), value)
    app.emit(result)
    if strict and not result.data.get("valid"):
        raise SystemExit(1)
