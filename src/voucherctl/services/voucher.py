"""VoucherService: the voucher rule engine.

Create:  LOOKUP → CONFLICT CHECK → INSERT
Apply:   LOOKUP → EXISTENCE CHECK → ELIGIBILITY → MARK USED → RESPOND

Engine errors are raised as :class:`~voucherctl.domain.errors.ConflictError`.
Anything the store raises propagates unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from voucherctl.domain.discount import (
    MIN_VALUE_FOR_DISCOUNT,
    apply_discount,
    is_amount_valid_for_discount,
)
from voucherctl.domain.errors import ConflictError
from voucherctl.domain.models import DiscountApplication
from voucherctl.domain.store import VoucherNotFoundError

if TYPE_CHECKING:
    from voucherctl.domain.models import Voucher
    from voucherctl.domain.store import VoucherStore

logger = logging.getLogger(__name__)


class VoucherService:
    """Creates, consumes, and applies single-use percentage vouchers.

    Usage::

        svc = VoucherService(SqlVoucherStore(engine))
        svc.create_voucher("SUMMER70", 70)
        svc.apply_voucher("SUMMER70", 200)  # final_amount=60.0, applied=True
    """

    MIN_VALUE_FOR_DISCOUNT = MIN_VALUE_FOR_DISCOUNT

    def __init__(self, store: VoucherStore, *, min_amount: float = MIN_VALUE_FOR_DISCOUNT) -> None:
        self._store = store
        self.min_amount = min_amount

    # ------------------------------------------------------------------
    # Pure rules
    # ------------------------------------------------------------------

    def is_amount_valid_for_discount(self, amount: float) -> bool:
        """True if *amount* is at or above this engine's threshold."""
        return is_amount_valid_for_discount(amount, self.min_amount)

    @staticmethod
    def apply_discount(amount: float, discount_percent: int) -> float:
        return apply_discount(amount, discount_percent)

    # ------------------------------------------------------------------
    # Store-backed operations
    # ------------------------------------------------------------------

    def get_voucher(self, code: str) -> Voucher:
        """Return the stored voucher for *code*.

        Raises:
            VoucherNotFoundError: If no voucher has this code.
        """
        voucher = self._store.get_voucher_by_code(code)
        if voucher is None:
            raise VoucherNotFoundError(code)
        return voucher

    def create_voucher(self, code: str, discount_percent: int) -> None:
        """Store a new unused voucher.

        Raises:
            ConflictError: If a voucher with *code* already exists.
        """
        if self._store.get_voucher_by_code(code) is not None:
            logger.debug("Rejected duplicate voucher code %s", code)
            raise ConflictError("Voucher already exist.")

        self._store.create_voucher(code, discount_percent)
        logger.info("Created voucher %s (%d%%)", code, discount_percent)

    def change_voucher_to_used(self, code: str) -> Voucher:
        """Mark *code* used via the store and return the updated voucher."""
        return self._store.use_voucher(code)

    def apply_voucher(self, code: str, amount: float) -> DiscountApplication:
        """Apply voucher *code* to a purchase of *amount*.

        The voucher is consumed only when it is unused and *amount* meets
        the threshold.  Otherwise the amount comes back unchanged and the
        store is not written to.

        Raises:
            ConflictError: If no voucher has this code.
            pydantic.ValidationError: If *amount* is negative or not finite.
                The store is not written to.
        """
        voucher = self._store.get_voucher_by_code(code)
        if voucher is None:
            logger.debug("Apply failed, unknown voucher code %s", code)
            raise ConflictError("Voucher does not exist.")

        valid_amount = self.is_amount_valid_for_discount(amount)
        if not valid_amount or voucher.used:
            logger.debug(
                "Voucher %s not applied (valid_amount=%s, used=%s)",
                code,
                valid_amount,
                voucher.used,
            )
            return DiscountApplication(
                amount=amount,
                discount=voucher.discount,
                final_amount=amount,
                applied=False,
            )

        # Validate the result before the write, persist before returning it.
        application = DiscountApplication(
            amount=amount,
            discount=voucher.discount,
            final_amount=self.apply_discount(amount, voucher.discount),
            applied=True,
        )
        self.change_voucher_to_used(code)
        logger.info("Applied voucher %s: %s -> %s", code, amount, application.final_amount)
        return application
