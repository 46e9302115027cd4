"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, voucherctl.toml only contains
overrides.  An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from voucherctl.domain.discount import MIN_VALUE_FOR_DISCOUNT


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    path: str = ".voucherctl/vouchers.db"
    echo: bool = False


class DiscountConfig(BaseModel):
    """[discount] section."""

    model_config = {"frozen": True}

    min_amount: float = Field(default=MIN_VALUE_FOR_DISCOUNT, ge=0)

