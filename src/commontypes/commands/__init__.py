"""Subcommand modules for commontypes.

Provides register_commands() which uses deferred imports to keep
``commontypes --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from commontypes.commands.date import date
    from commontypes.commands.instant import instant

    cli.add_command(date)
    cli.add_command(instant)

    # --- Standalone commands ---
    from commontypes.commands.check import check
    from commontypes.commands.config_cmd import config_cmd

    cli.add_command(check)
    cli.add_command(config_cmd)
