"""AppContext — the object every command receives via ``@click.pass_obj``.

Built once per invocation by the root group. It configures logging, hands
out a :class:`~commontypes.services.temporal.TemporalService` bound to the
configured clock and zone, and turns a ``ServiceResult`` into output and
an exit status.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from commontypes.config.logging import bind_invocation, configure_logging
from commontypes.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from commontypes.config.settings import TypesSettings
    from commontypes.services.result import ServiceResult
    from commontypes.services.temporal import TemporalService

logger = logging.getLogger(__name__)


class AppContext:
    """Per-invocation state shared by all subcommands.

    The service is built on first use, so ``--help`` and ``--version``
    never read the clock.
    """

    def __init__(self, settings: TypesSettings) -> None:
        self.settings = settings
        self._service: TemporalService | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        bind_invocation(config_source=settings.config_source.value)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    @property
    def service(self) -> TemporalService:
        """TemporalService for this invocation."""
        if self._service is None:
            from commontypes.services.temporal import TemporalService

            clock = self.settings.build_clock()
            logger.debug("Using clock %r (offset %s)", clock, self.settings.clock.offset)
            self._service = TemporalService(clock, self.settings.zone)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit 1 if it failed.

        Successful output goes to stdout. Failures go to stderr, and so do
        warnings unless the output is JSON or quiet.
        """
        out = self.output_settings
        text = format_result(result, settings=out)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if out.json_output or out.quiet:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
