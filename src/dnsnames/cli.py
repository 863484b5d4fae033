"""``dnsnames`` root command: global output flags, config loading, subcommands."""

from __future__ import annotations

from typing import Any

import click
from pydantic import ValidationError

from dnsnames import __version__
from dnsnames.commands import register_commands
from dnsnames.commands._context import AppContext
from dnsnames.config.settings import DnsNamesSettings

_EPILOG = (
    "Defaults are read from dnsnames.toml (searched upward from the current "
    "directory, or named by DNSNAMES_CONFIG) and from DNSNAMES_* variables."
)


def _load_settings(config_path: str | None, **flags: Any) -> DnsNamesSettings:
    try:
        return DnsNamesSettings.from_cli(config_path=config_path, **flags)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc


@click.group(invoke_without_command=True, epilog=_EPILOG)
@click.version_option(version=__version__, prog_name="dnsnames")
@click.option("--json", "json_output", is_flag=True, help="Print the raw result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the primary value.")
@click.option("-v", "--verbose", is_flag=True, help="Show misses, error detail and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", default=None, help="Use this config file.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """dnsnames — validate, relate and match DNS domain names."""
    ctx.obj = AppContext(_load_settings(config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
