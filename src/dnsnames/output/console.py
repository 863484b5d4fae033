"""Rich console and theme used by the human-readable renderers.

Renderers draw into a Console backed by ``StringIO`` and hand the text back,
so ``format_result`` can stay a plain ``ServiceResult -> str`` function.
Rich drops color codes on its own when the buffer is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

DNS_THEME = Theme(
    {
        # status line
        "dns.ok": "bold green",
        "dns.error": "bold red",
        "dns.warning": "bold yellow",
        "dns.op": "bold cyan",
        "dns.key": "dim",
        # values
        "dns.name": "bold blue",
        "dns.pattern": "bold magenta",
        "dns.match": "green",
        "dns.miss": "dim",
        "dns.kind.full": "green",
        "dns.kind.partial": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """A themed Console writing into a fresh buffer, read back with :func:`get_output`."""
    return Console(
        file=StringIO(),
        theme=DNS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    assert isinstance(buffer, StringIO)
    return buffer.getvalue()


def style_for_kind(kind: str) -> str:
    """Theme style for a qualification value (``full``/``partial``), or ``""``."""
    style = f"dns.kind.{kind}"
    return style if style in DNS_THEME.styles else ""
