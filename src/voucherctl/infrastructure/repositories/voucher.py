"""SQL-backed implementation of the voucher store contract."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Engine

from voucherctl.domain.models import Voucher
from voucherctl.domain.store import VoucherNotFoundError
from voucherctl.infrastructure.database.schema import vouchers

logger = logging.getLogger(__name__)


def _to_voucher(row: Any) -> Voucher:
    return Voucher(id=row["id"], code=row["code"], discount=row["discount"], used=bool(row["used"]))


class SqlVoucherStore:
    """Encapsulates SQL for voucher lookup, insert, and mark-used."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_voucher_by_code(self, code: str) -> Voucher | None:
        """Fetch one voucher by code."""
        stmt = select(vouchers).where(vouchers.c.code == code)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return _to_voucher(row) if row is not None else None

    def create_voucher(self, code: str, discount_percent: int) -> None:
        """Insert an unused voucher.

        A duplicate code surfaces as :class:`sqlalchemy.exc.IntegrityError`.
        """
        with self._engine.begin() as conn:
            conn.execute(insert(vouchers).values(code=code, discount=discount_percent, used=False))
        logger.debug("Inserted voucher %s", code)

    def use_voucher(self, code: str) -> Voucher:
        """Mark *code* used and return the updated row in one statement."""
        stmt = (
            update(vouchers)
            .where(vouchers.c.code == code)
            .values(used=True)
            .returning(vouchers.c.id, vouchers.c.code, vouchers.c.discount, vouchers.c.used)
        )
        with self._engine.begin() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            raise VoucherNotFoundError(code)
        return _to_voucher(row)
