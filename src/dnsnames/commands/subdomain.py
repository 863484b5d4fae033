"""Command: check the subdomain relation between two names."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsnames.commands._base import DnsCommand

if TYPE_CHECKING:
    from dnsnames.commands._context import AppContext


@click.command(
    cls=DnsCommand,
    examples="""\
  dnsnames subdomain www.example.org. example.org.
  dnsnames -q subdomain example.org. example.org.""",
)
@click.argument("name")
@click.argument("parent")
@click.pass_obj
def subdomain(app: AppContext, name: str, parent: str) -> None:
    """Check whether NAME lies strictly below PARENT."""
    app.emit(app.names.subdomain(name, parent))
