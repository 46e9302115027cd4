"""Command group: voucher create, show, apply, use."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

import click

from voucherctl.commands._base import examples_option

if TYPE_CHECKING:
    from voucherctl.commands._context import AppContext


def _non_empty_code(_ctx: click.Context, param: click.Parameter, value: str) -> str:
    if not value:
        raise click.BadParameter("voucher code must not be empty.", param=param)
    return value


def _finite_amount(_ctx: click.Context, param: click.Parameter, value: float) -> float:
    # FloatRange lets nan and inf through.
    if not math.isfinite(value):
        raise click.BadParameter(f"{value} is not a finite amount.", param=param)
    return value


code_argument = click.argument("code", callback=_non_empty_code)


@click.group()
@examples_option(
    """\
  voucherctl voucher create SUMMER70 70
  voucherctl voucher show SUMMER70
  voucherctl voucher apply SUMMER70 200
  voucherctl --json voucher use SUMMER70"""
)
def voucher() -> None:
    """Create, inspect, and apply discount vouchers."""


@voucher.command()
@examples_option(
    """\
  voucherctl voucher create SUMMER70 70
  voucherctl --json voucher create FREEBIE 100"""
)
@code_argument
@click.argument("discount", type=click.IntRange(0, 100))
@click.pass_obj
def create(app: AppContext, code: str, discount: int) -> None:
    """Create voucher CODE worth DISCOUNT percent."""

    def _create() -> dict[str, Any]:
        app.service.create_voucher(code, discount)
        return {"code": code, "discount": discount}

    app.emit(app.run("create_voucher", _create))


@voucher.command()
@examples_option(
    """\
  voucherctl voucher show SUMMER70
  voucherctl --json voucher show SUMMER70"""
)
@code_argument
@click.pass_obj
def show(app: AppContext, code: str) -> None:
    """Show the stored record for CODE."""
    app.emit(app.run("get_voucher", lambda: app.service.get_voucher(code).model_dump()))


@voucher.command()
@examples_option(
    """\
  voucherctl voucher apply SUMMER70 200
  voucherctl -q voucher apply SUMMER70 250.50"""
)
@code_argument
@click.argument("amount", type=click.FloatRange(min=0), callback=_finite_amount)
@click.pass_obj
def apply(app: AppContext, code: str, amount: float) -> None:
    """Apply CODE to a purchase of AMOUNT, consuming it if eligible."""

    def _apply() -> dict[str, Any]:
        application = app.service.apply_voucher(code, amount)
        return {"code": code, **application.model_dump()}

    app.emit(app.run("apply_voucher", _apply))


@voucher.command()
@examples_option("  voucherctl voucher use SUMMER70")
@code_argument
@click.pass_obj
def use(app: AppContext, code: str) -> None:
    """Mark CODE as used without applying it to a purchase."""
    app.emit(app.run("use_voucher", lambda: app.service.change_voucher_to_used(code).model_dump()))
