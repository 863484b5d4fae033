"""Command: match domain names against a wildcard pattern."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsnames.commands._base import DnsCommand

if TYPE_CHECKING:
    from dnsnames.commands._context import AppContext


@click.command(
    cls=DnsCommand,
    examples="""\
  dnsnames match '*.example.org' www.example.org. a.b.example.org.
  dnsnames match 'dev*.example.org' dev-1.example.org. www.example.org.
  dnsnames match 'www.@' www.example.org. --origin example.org.
  dnsnames -q match '*.example.org' www.example.org. example.org.""",
)
@click.argument("pattern")
@click.argument("names", nargs=-1, required=True)
@click.option(
    "--origin",
    default=None,
    help="Zone origin replacing a trailing @ (defaults to [zone] origin).",
)
@click.pass_obj
def match(app: AppContext, pattern: str, names: tuple[str, ...], origin: str | None) -> None:
    """Report which NAMES match PATTERN."""
    app.emit(app.names.match(pattern, names, origin=origin))
