"""AppContext: the object every subcommand receives via ``@click.pass_obj``.

The root group builds it once per invocation from the resolved settings.
It owns the configured :class:`NameService` and decides where a
ServiceResult is written and with which exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsnames.config.logging import configure_logging
from dnsnames.output.formatters import OutputSettings, format_result
from dnsnames.services.names import NameService

if TYPE_CHECKING:
    from dnsnames.config.settings import DnsNamesSettings
    from dnsnames.services.result import ServiceResult


class AppContext:
    """Settings, services and output routing for one CLI run."""

    def __init__(self, settings: DnsNamesSettings) -> None:
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self.names = NameService(origin=settings.zone.origin)

    def emit(self, result: ServiceResult) -> None:
        """Write *result* and translate failure into exit status 1.

        Successful output goes to stdout. Failures go to stderr. In quiet
        mode warnings are not part of the rendered text, so they are echoed
        to stderr separately.
        """
        click.echo(format_result(result, settings=self.output), err=not result.ok)
        if not result.ok:
            raise SystemExit(1)
        if self.output.quiet and not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
