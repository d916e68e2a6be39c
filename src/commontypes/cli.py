"""Root CLI group for commontypes with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click

from commontypes import __version__
from commontypes.commands import register_commands
from commontypes.commands._base import TypesGroup
from commontypes.commands._context import AppContext
from commontypes.config.settings import TypesSettings


@click.group(cls=TypesGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="commontypes")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--now",
    "fixed_now",
    default=None,
    metavar="INSTANT",
    help="Pin the current time (YYYY-MM-DDTHH:MM:SS±HH:MM).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    fixed_now: str | None,
) -> None:
    """commontypes — inspect and validate immutable value types."""
    ctx.ensure_object(dict)
    overrides: dict[str, Any] = {}
    if fixed_now is not None:
        overrides["clock"] = {"fixed_now": fixed_now}
    try:
        settings = TypesSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            **overrides,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="configuration") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
