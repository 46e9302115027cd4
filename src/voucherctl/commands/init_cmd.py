"""Command: database initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from voucherctl.commands._base import examples_option

if TYPE_CHECKING:
    from voucherctl.commands._context import AppContext


@click.command("init")
@examples_option(
    """\
  voucherctl init
  voucherctl --config ./shop/voucherctl.toml init
  VOUCHERCTL_DATABASE__PATH=/var/lib/vouchers.db voucherctl init"""
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the voucher database (safe to re-run)."""

    def _init() -> dict[str, str]:
        _ = app.engine
        return {"database": str(app.settings.db_path)}

    app.emit(app.run("init", _init))
