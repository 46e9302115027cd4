"""Tests for SqlVoucherStore."""

from __future__ import annotations

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from voucherctl.domain.models import Voucher
from voucherctl.domain.store import VoucherNotFoundError
from voucherctl.infrastructure.repositories.voucher import SqlVoucherStore


@pytest.fixture
def store(db_engine: Engine) -> SqlVoucherStore:
    return SqlVoucherStore(db_engine)


class TestGetVoucherByCode:
    def test_miss_returns_none(self, store: SqlVoucherStore) -> None:
        assert store.get_voucher_by_code("NOPE") is None

    def test_hit_returns_voucher(self, store: SqlVoucherStore) -> None:
        store.create_voucher("SUMMER70", 70)
        found = store.get_voucher_by_code("SUMMER70")
        assert isinstance(found, Voucher)
        assert found.code == "SUMMER70"
        assert found.discount == 70
        assert found.used is False
        assert found.id >= 1

    def test_codes_are_case_sensitive(self, store: SqlVoucherStore) -> None:
        store.create_voucher("Summer", 10)
        assert store.get_voucher_by_code("SUMMER") is None


class TestCreateVoucher:
    def test_assigns_distinct_ids(self, store: SqlVoucherStore) -> None:
        store.create_voucher("A", 10)
        store.create_voucher("B", 20)
        a = store.get_voucher_by_code("A")
        b = store.get_voucher_by_code("B")
        assert a is not None and b is not None
        assert a.id != b.id

    def test_duplicate_raises_integrity_error(self, store: SqlVoucherStore) -> None:
        store.create_voucher("A", 10)
        with pytest.raises(IntegrityError):
            store.create_voucher("A", 10)

    def test_empty_code_never_stored(self, store: SqlVoucherStore) -> None:
        for _ in range(2):
            with pytest.raises(IntegrityError):
                store.create_voucher("", 10)
        assert store.get_voucher_by_code("") is None


class TestUseVoucher:
    def test_marks_used_and_returns(self, store: SqlVoucherStore) -> None:
        store.create_voucher("A", 25)
        updated = store.use_voucher("A")
        assert updated.used is True
        assert updated.discount == 25
        refreshed = store.get_voucher_by_code("A")
        assert refreshed is not None and refreshed.used is True

    def test_used_flag_never_reverts(self, store: SqlVoucherStore) -> None:
        store.create_voucher("A", 25)
        store.use_voucher("A")
        assert store.use_voucher("A").used is True

    def test_unknown_code_raises(self, store: SqlVoucherStore) -> None:
        with pytest.raises(VoucherNotFoundError) as exc_info:
            store.use_voucher("MISSING")
        assert exc_info.value.code == "MISSING"
