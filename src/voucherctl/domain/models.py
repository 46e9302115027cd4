"""Pydantic models for vouchers and discount applications."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Voucher(BaseModel):
    """A stored voucher record.

    ``code`` and ``discount`` never change after creation.  ``used`` moves
    from False to True exactly once, through the store's mark-used write.
    """

    model_config = {"frozen": True}

    id: int
    code: str = Field(min_length=1)
    discount: int = Field(ge=0, le=100)
    used: bool = False


class DiscountApplication(BaseModel):
    """Outcome of applying a voucher to a purchase amount.

    Not persisted.  ``final_amount`` equals ``amount`` whenever
    ``applied`` is False.
    """

    model_config = {"frozen": True}

    amount: float = Field(ge=0, allow_inf_nan=False)
    discount: int = Field(ge=0, le=100)
    final_amount: float = Field(allow_inf_nan=False)
    applied: bool
