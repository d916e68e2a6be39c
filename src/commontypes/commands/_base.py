"""Click base classes adding ``-h`` and an ``--examples`` flag.

``--examples`` prints usage examples for the command and exits, which
keeps ``--help`` short while examples stay one flag away.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class _ExamplesMixin:
    """Adds an eager ``--examples`` option when ``examples=`` is given."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = textwrap.dedent(examples).strip("\n") if examples else None
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(textwrap.indent(self.examples or "", "  "))
        ctx.exit(0)


class TypesCommand(_ExamplesMixin, click.Command):
    """Click Command supporting ``examples=``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("context_settings", CONTEXT_SETTINGS)
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class TypesGroup(_ExamplesMixin, click.Group):
    """Click Group whose subcommands default to :class:`TypesCommand`."""

    command_class = TypesCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("context_settings", CONTEXT_SETTINGS)
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
