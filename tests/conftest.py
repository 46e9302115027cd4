"""Shared pytest fixtures and test doubles for voucherctl tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from voucherctl.domain.models import Voucher
from voucherctl.domain.store import VoucherNotFoundError
from voucherctl.infrastructure.database.engine import init_database


class FakeVoucherStore:
    """In-memory VoucherStore that records every call it receives."""

    def __init__(self, *vouchers: Voucher) -> None:
        self.vouchers: dict[str, Voucher] = {v.code: v for v in vouchers}
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    @property
    def writes(self) -> list[tuple[str, tuple[object, ...]]]:
        return [c for c in self.calls if c[0] != "get_voucher_by_code"]

    def get_voucher_by_code(self, code: str) -> Voucher | None:
        self.calls.append(("get_voucher_by_code", (code,)))
        return self.vouchers.get(code)

    def create_voucher(self, code: str, discount_percent: int) -> None:
        self.calls.append(("create_voucher", (code, discount_percent)))
        self.vouchers[code] = Voucher(id=len(self.vouchers) + 1, code=code, discount=discount_percent)

    def use_voucher(self, code: str) -> Voucher:
        self.calls.append(("use_voucher", (code,)))
        if code not in self.vouchers:
            raise VoucherNotFoundError(code)
        updated = self.vouchers[code].model_copy(update={"used": True})
        self.vouchers[code] = updated
        return updated


class FailingCreateStore(FakeVoucherStore):
    """Store whose insert fails the way a full disk would."""

    def create_voucher(self, code: str, discount_percent: int) -> None:
        self.calls.append(("create_voucher", (code, discount_percent)))
        raise RuntimeError("disk full")


class VanishingVoucherStore(FakeVoucherStore):
    """Store where a voucher disappears between lookup and mark-used."""

    def use_voucher(self, code: str) -> Voucher:
        self.calls.append(("use_voucher", (code,)))
        raise VoucherNotFoundError(code)


@pytest.fixture
def fake_store() -> FakeVoucherStore:
    """Empty in-memory store."""
    return FakeVoucherStore()


@pytest.fixture
def make_store() -> type[FakeVoucherStore]:
    """The FakeVoucherStore class, for tests that seed their own vouchers."""
    return FakeVoucherStore


@pytest.fixture
def failing_create_store() -> FailingCreateStore:
    """Empty store whose create_voucher always raises RuntimeError."""
    return FailingCreateStore()


@pytest.fixture
def vanishing_store_cls() -> type[VanishingVoucherStore]:
    """Store class whose use_voucher always raises VoucherNotFoundError."""
    return VanishingVoucherStore


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path / "vouchers.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory with no config overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes; the database lands in ``tmp_path/.voucherctl/``.
    """
    for var in ("VOUCHERCTL_CONFIG", "VOUCHERCTL_DATABASE__PATH", "VOUCHERCTL_DISCOUNT__MIN_AMOUNT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
