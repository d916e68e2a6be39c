"""Human-readable rendering of ServiceResult.

A result is drawn by the drawer registered for its ``op`` in
``_DRAWERS``; date and instant operations share the default temporal
drawer. Failed results always use the error drawer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from commontypes.output.console import render_text

if TYPE_CHECKING:
    from rich.console import Console

    from commontypes.services.result import ServiceResult

Drawer = Callable[["Console", "ServiceResult", bool], None]

# Printed above the field table, in this order, when present.
_HEADLINE = ("value", "formatted", "precise", "original", "modifier", "date")
_TABLE_ROWS = (
    "year",
    "month",
    "day",
    "weekday",
    "day_of_week",
    "day_of_year",
    "week",
    "hour",
    "minute",
    "second",
    "microsecond",
)


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* with Rich; plain text when stdout is not a terminal."""
    draw = _DRAWERS.get(result.op, _draw_temporal) if result.ok else _draw_error
    return render_text(lambda console: draw(console, result, verbose))


def render_quiet(result: ServiceResult) -> str:
    """Bare value for ``--quiet``: the canonical value, or the check verdict."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {message}"
    if result.op == "check":
        return "valid" if result.data.get("valid") else "invalid"
    if "value" in result.data:
        return str(result.data["value"])
    return f"OK: {result.op}"


def _pair(key: str, value: Any, style: str = "") -> Text:
    return Text.assemble((f"  {key}: ", "ct.key"), (str(value), style))


def _draw_status(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "ct.ok"), (f"  {result.op}", "ct.op")))


def _draw_mapping(console: Console, title: str, mapping: dict[str, Any]) -> None:
    console.print(Text(f"  {title}:", style="dim"))
    for key, value in mapping.items():
        console.print(Text(f"    {key}: {value}"))


def _draw_error(console: Console, result: ServiceResult, verbose: bool) -> None:
    error = result.error
    console.print(
        Text.assemble(
            ("ERROR", "ct.error"),
            (f"  {result.op}", "ct.op"),
            ": ",
            error.message if error else "Unknown error",
        )
    )
    if verbose and error and error.detail:
        _draw_mapping(console, "detail", error.detail)


def _draw_temporal(console: Console, result: ServiceResult, verbose: bool) -> None:
    data = result.data
    _draw_status(console, result)
    for key in _HEADLINE:
        if key in data:
            console.print(_pair(key, data[key], "ct.value" if key == "value" else ""))

    rows = [key for key in _TABLE_ROWS if key in data]
    if verbose and "timestamp" in data:
        rows.append("timestamp")
    if rows:
        table = Table(pad_edge=False)
        table.add_column("Field", style="ct.key")
        table.add_column("Value", justify="right")
        for key in rows:
            table.add_row(key, str(data[key]))
        console.print(table)

    if verbose and result.meta:
        console.print()
        _draw_mapping(console, "meta", result.meta)


def _draw_check(console: Console, result: ServiceResult, verbose: bool) -> None:
    data = result.data
    valid = bool(data.get("valid"))
    _draw_status(console, result)
    console.print(_pair("kind", data.get("kind", "")))
    console.print(_pair("value", data.get("value", ""), "ct.value"))
    console.print(_pair("valid", "yes" if valid else "no", "ct.valid" if valid else "ct.invalid"))


def _draw_plain(console: Console, result: ServiceResult, verbose: bool) -> None:
    """Every data key on its own line; nested values as compact JSON."""
    _draw_status(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        console.print(_pair(key, value))
    if verbose and result.meta:
        console.print()
        _draw_mapping(console, "meta", result.meta)


_DRAWERS: dict[str, Drawer] = {
    "check": _draw_check,
    "config": _draw_plain,
}
