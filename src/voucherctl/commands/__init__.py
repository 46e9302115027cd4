"""Subcommand modules for voucherctl.

Provides register_commands() which uses deferred imports to keep
``voucherctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the voucher group and the standalone init command."""
    from voucherctl.commands.init_cmd import init_cmd
    from voucherctl.commands.voucher import voucher

    cli.add_command(voucher)
    cli.add_command(init_cmd)
