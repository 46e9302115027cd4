"""Shared ``--examples`` flag for voucherctl commands.

Help text stays short; ``voucherctl voucher apply --examples`` prints a few
ready-to-paste invocations and exits before any database is opened.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click


def examples_option(examples: str) -> Callable[[Any], Any]:
    """Decorator adding an eager ``--examples`` flag that prints *examples*."""

    def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print_examples,
        help="Show usage examples.",
    )
