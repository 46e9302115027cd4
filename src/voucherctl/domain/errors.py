"""Domain errors raised by the voucher rule engine.

Every error carries a ``kind`` (stable, machine-readable) and a
human-readable ``message``.  Store failures are never wrapped in these
types; they propagate from the repository unchanged.
"""

from __future__ import annotations

from typing import ClassVar


class VoucherError(Exception):
    """Base class for rule-engine errors."""

    kind: ClassVar[str] = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """Return the ``{"type", "message"}`` payload shown to callers."""
        return {"type": self.kind, "message": self.message}


class ConflictError(VoucherError):
    """The requested operation conflicts with the stored voucher state."""

    kind: ClassVar[str] = "conflict"
