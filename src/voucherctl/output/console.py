"""Rich Console factory and theme for voucherctl output.

Consoles render into a StringIO buffer so renderers keep the
``format_result() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

VOUCHER_THEME = Theme(
    {
        "vc.ok": "bold green",
        "vc.error": "bold red",
        "vc.warning": "bold yellow",
        "vc.op": "bold cyan",
        "vc.key": "dim",
        "vc.code": "bold blue",
        "vc.amount": "magenta",
        "vc.applied": "green",
        "vc.skipped": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=VOUCHER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
