"""Command: validate and describe a domain name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsnames.commands._base import DnsCommand

if TYPE_CHECKING:
    from dnsnames.commands._context import AppContext


@click.command(
    cls=DnsCommand,
    examples="""\
  dnsnames inspect www.example.org.
  dnsnames inspect '*.dev'
  dnsnames --json inspect mail.@""",
)
@click.argument("name")
@click.pass_obj
def inspect(app: AppContext, name: str) -> None:
    """Validate NAME and show its qualification, segments and length."""
    app.emit(app.names.inspect(name))
