"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from voucherctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from voucherctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    if result.op == "apply_voucher":
        return str(result.data.get("final_amount", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="vc.ok"), Text(f"  {result.op}", style="vc.op"), sep="")


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="vc.key"), Text(str(value), style=style), sep="")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_voucher(result: ServiceResult, console: Console) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "code", data.get("code", ""), "vc.code")
    _field(console, "discount", f"{data.get('discount', 0)}%")
    if "used" in data:
        _field(console, "used", "yes" if data["used"] else "no")


def _render_application(result: ServiceResult, console: Console) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "code", data.get("code", ""), "vc.code")
    _field(console, "amount", data.get("amount"), "vc.amount")
    _field(console, "discount", f"{data.get('discount', 0)}%")
    _field(console, "final_amount", data.get("final_amount"), "vc.amount")
    if data.get("applied"):
        _field(console, "applied", "yes", "vc.applied")
    else:
        _field(console, "applied", "no (voucher used or amount below minimum)", "vc.skipped")


def _render_error(result: ServiceResult, console: Console) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="vc.error")
    op = Text(f"  {result.op}", style="vc.op")
    console.print(label, op, Text(f" - {msg}"), sep="")
    if err is not None:
        _field(console, "code", err.code)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "create_voucher": _render_voucher,
    "get_voucher": _render_voucher,
    "use_voucher": _render_voucher,
    "apply_voucher": _render_application,
}
