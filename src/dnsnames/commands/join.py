"""Command: prefix a base name with a partially qualified name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsnames.commands._base import DnsCommand

if TYPE_CHECKING:
    from dnsnames.commands._context import AppContext


@click.command(
    cls=DnsCommand,
    examples="""\
  dnsnames join www example.org.
  dnsnames join api.v2 internal""",
)
@click.argument("relative")
@click.argument("base")
@click.pass_obj
def join(app: AppContext, relative: str, base: str) -> None:
    """Concatenate RELATIVE in front of BASE."""
    app.emit(app.names.join(relative, base))
