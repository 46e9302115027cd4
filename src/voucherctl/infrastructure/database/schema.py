"""SQLAlchemy Core table definitions for the voucher database."""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Integer,
    MetaData,
    Table,
    Text,
)

metadata = MetaData()

vouchers = Table(
    "vouchers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("code", Text, nullable=False, unique=True),
    Column("discount", Integer, nullable=False),
    Column("used", Boolean, nullable=False, default=False, server_default="0"),
    CheckConstraint("length(code) > 0", name="ck_vouchers_code_not_empty"),
    CheckConstraint("discount BETWEEN 0 AND 100", name="ck_vouchers_discount_range"),
)
