"""Tests for voucher table constraints."""

import pytest
from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from voucherctl.infrastructure.database.schema import vouchers


class TestVouchersTable:
    def test_used_defaults_false(self, db_engine: Engine) -> None:
        with db_engine.begin() as conn:
            conn.execute(insert(vouchers).values(code="A", discount=10))
            used = conn.execute(select(vouchers.c.used).where(vouchers.c.code == "A")).scalar_one()
        assert used is False

    def test_code_unique(self, db_engine: Engine) -> None:
        with db_engine.begin() as conn:
            conn.execute(insert(vouchers).values(code="A", discount=10))
        with pytest.raises(IntegrityError):
            with db_engine.begin() as conn:
                conn.execute(insert(vouchers).values(code="A", discount=20))

    @pytest.mark.parametrize("discount", [-1, 101])
    def test_discount_range_checked(self, db_engine: Engine, discount: int) -> None:
        with pytest.raises(IntegrityError):
            with db_engine.begin() as conn:
                conn.execute(insert(vouchers).values(code="BAD", discount=discount))

    def test_empty_code_rejected(self, db_engine: Engine) -> None:
        with pytest.raises(IntegrityError):
            with db_engine.begin() as conn:
                conn.execute(insert(vouchers).values(code="", discount=10))
