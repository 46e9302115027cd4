"""SQLite database engine and schema via SQLAlchemy Core."""

from voucherctl.infrastructure.database.engine import create_db_engine, init_database
from voucherctl.infrastructure.database.schema import metadata, vouchers

__all__ = [
    "create_db_engine",
    "init_database",
    "metadata",
    "vouchers",
]
