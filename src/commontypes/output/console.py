"""Off-screen Rich rendering.

Renderers draw onto a Console whose file is a StringIO and hand back the
text, so ``format_result()`` stays a plain ``-> str`` function and Click
decides where it is printed. Rich drops color codes on its own when the
buffer is not a terminal.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

THEME = Theme(
    {
        "ct.ok": "bold green",
        "ct.error": "bold red",
        "ct.op": "bold cyan",
        "ct.key": "dim",
        "ct.value": "bold blue",
        "ct.valid": "green",
        "ct.invalid": "red",
    }
)


def buffer_console(*, width: int | None = None) -> Console:
    """A themed Console writing into a fresh StringIO."""
    return Console(file=StringIO(), theme=THEME, highlight=False, width=width or DEFAULT_WIDTH)


def render_text(draw: Callable[[Console], object], *, width: int | None = None) -> str:
    """Run *draw* against a buffer console and return what it printed.

    Trailing newlines are stripped; ``click.echo`` adds its own.
    """
    console = buffer_console(width=width)
    draw(console)
    buffer = console.file
    assert isinstance(buffer, StringIO)
    return buffer.getvalue().rstrip("\n")
