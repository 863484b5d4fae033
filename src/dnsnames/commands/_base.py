"""``DnsCommand``: a click command that can print usage examples.

``--help`` stays short; ``--examples`` prints the command's example
invocations and exits before any argument is validated.
"""

from __future__ import annotations

from typing import Any

import click


class DnsCommand(click.Command):
    """Click command carrying an optional block of example invocations."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        params = super().get_params(ctx)
        if not self.examples:
            return params
        option = click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._print_examples,
            help="Show usage examples and exit.",
        )
        # Listed just above --help.
        return [*params[:-1], option, params[-1]] if params else [option]

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
