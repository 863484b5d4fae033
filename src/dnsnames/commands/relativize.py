"""Command: express a fully qualified name relative to a zone origin."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsnames.commands._base import DnsCommand

if TYPE_CHECKING:
    from dnsnames.commands._context import AppContext


@click.command(
    cls=DnsCommand,
    examples="""\
  dnsnames relativize www.example.org. --origin example.org.
  dnsnames relativize a.b.example.org. --origin org.""",
)
@click.argument("name")
@click.option(
    "--origin",
    default=None,
    help="Zone origin to strip (defaults to [zone] origin).",
)
@click.pass_obj
def relativize(app: AppContext, name: str, origin: str | None) -> None:
    """Strip the zone origin from the fully qualified NAME."""
    app.emit(app.names.relativize(name, origin=origin))
