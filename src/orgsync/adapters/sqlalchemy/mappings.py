"""SQLAlchemy table metadata for the organization store.

The domain model is not mapped onto the ORM. Repositories translate rows into
plain dataclasses with Core statements, so nothing is change-tracked and every
write goes through an explicit ``save``.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from decimal import ROUND_HALF_EVEN, Decimal
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Dialect,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    TypeDecorator,
    event,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

_CENT = Decimal("0.01")


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


class Money(TypeDecorator[Decimal]):
    """Currency amount stored as an integer number of cents."""

    impl = BigInteger
    cache_ok = True

    @staticmethod
    def to_cents(value: Decimal | int | float | str) -> int:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        return int((amount * 100).to_integral_value(rounding=ROUND_HALF_EVEN))

    @staticmethod
    def from_cents(value: int) -> Decimal:
        return (Decimal(value) * _CENT).quantize(_CENT)

    def process_bind_param(self, value: Any, dialect: Dialect) -> int | None:
        _ = dialect
        if value is None:
            return None
        return self.to_cents(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> Decimal | None:
        _ = dialect
        if value is None:
            return None
        return self.from_cents(int(value))


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

department_table = Table(
    "department",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String, nullable=False),
    Column("location", String, nullable=False),
    Column("budget", Money(), nullable=False),
)

employee_table = Table(
    "employee",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("first_name", String, nullable=False),
    Column("last_name", String, nullable=False),
    Column("email", String, nullable=False),
    Column("salary", Money(), nullable=False),
    Column("hire_date", UTCDateTime(), nullable=False),
    Column(
        "department_id",
        Integer,
        ForeignKey("department.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Index("ix_employee_department_id", "department_id"),
)

project_table = Table(
    "project",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String, nullable=False),
    Column("description", String, nullable=False),
    Column("start_date", UTCDateTime(), nullable=False),
    Column("end_date", UTCDateTime(), nullable=True),
    Column("budget", Money(), nullable=False),
)

# join table; one row per edge, no attributes
employee_project_table = Table(
    "employee_project",
    metadata,
    Column(
        "employee_id",
        Integer,
        ForeignKey("employee.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "project_id",
        Integer,
        ForeignKey("project.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Index("ix_employee_project_project_id", "project_id"),
)


def _set_foreign_keys_pragma(dbapi_connection: Any, connection_record: Any) -> None:
    _ = connection_record
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Have SQLite enforce foreign keys on every new connection."""

    if engine.dialect.name != "sqlite":
        return
    if not event.contains(engine, "connect", _set_foreign_keys_pragma):
        event.listen(engine, "connect", _set_foreign_keys_pragma)


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the organization metadata."""

    log.info("Creating all tables")
    metadata.create_all(engine)
