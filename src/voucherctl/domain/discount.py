"""Discount arithmetic and purchase-amount eligibility.

Pure functions, no I/O.  The rule engine in
:mod:`voucherctl.services.voucher` composes them with store access.
"""

from __future__ import annotations

MIN_VALUE_FOR_DISCOUNT = 100


def is_amount_valid_for_discount(amount: float, minimum: float = MIN_VALUE_FOR_DISCOUNT) -> bool:
    """Return True if *amount* reaches the discount threshold (inclusive).

    Examples:
        >>> is_amount_valid_for_discount(MIN_VALUE_FOR_DISCOUNT)
        True
        >>> is_amount_valid_for_discount(MIN_VALUE_FOR_DISCOUNT - 1)
        False
    """
    return amount >= minimum


def apply_discount(amount: float, discount_percent: int) -> float:
    """Return *amount* reduced by *discount_percent* percent.

    Multiplies before dividing so whole-number inputs stay exact.

    Examples:
        >>> apply_discount(200, 70)
        60.0
        >>> apply_discount(200, 100)
        0.0
    """
    return amount * (100 - discount_percent) / 100
