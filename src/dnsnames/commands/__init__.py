"""Subcommand modules for dnsnames.

Provides register_commands() which uses deferred imports to keep
``dnsnames --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from dnsnames.commands.inspect_cmd import inspect
    from dnsnames.commands.join import join
    from dnsnames.commands.match import match
    from dnsnames.commands.relativize import relativize
    from dnsnames.commands.subdomain import subdomain

    cli.add_command(inspect)
    cli.add_command(match)
    cli.add_command(relativize)
    cli.add_command(join)
    cli.add_command(subdomain)
