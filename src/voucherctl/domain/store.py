"""VoucherStore: the persistence contract consumed by the rule engine.

The engine receives a store at construction time and never talks to a
database directly.  :class:`voucherctl.infrastructure.repositories.voucher.SqlVoucherStore`
is the production implementation; tests pass a fake.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from voucherctl.domain.models import Voucher


class VoucherNotFoundError(LookupError):
    """Raised by :meth:`VoucherStore.use_voucher` for an unknown code."""

    def __init__(self, code: str) -> None:
        super().__init__(f"No voucher with code {code!r}")
        self.code = code


class VoucherStore(Protocol):
    """Voucher records keyed by their unique code."""

    def get_voucher_by_code(self, code: str) -> Voucher | None:
        """Return the voucher for *code*, or None. A miss is not an error."""
        ...

    def create_voucher(self, code: str, discount_percent: int) -> None:
        """Insert an unused voucher. May raise a store-level error."""
        ...

    def use_voucher(self, code: str) -> Voucher:
        """Atomically mark *code* used and return the updated record.

        Raises:
            VoucherNotFoundError: If no voucher has this code.
        """
        ...
