from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import pytest

from orgsync import app
from orgsync.adapters.sqlalchemy.unit_of_work import is_started, shutdown
from tests.helpers.organization import (
    employee_update_from,
    load_employee,
    load_project,
    project_update_from,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

    from orgsync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

    UnitOfWorkFactory = Callable[[], SqlAlchemyUnitOfWork]


@pytest.fixture
def file_database(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[str]:
    shutdown()
    uri = f"sqlite+pysqlite:///{tmp_path / 'orgsync.db'}"
    monkeypatch.setenv("DATABASE_URI", uri)
    monkeypatch.delenv("ORGSYNC_SQL_ECHO", raising=False)
    try:
        yield uri
    finally:
        shutdown()


def test_update_employee_uses_given_unit_of_work(
    seeded_unit_of_work: UnitOfWorkFactory,
) -> None:
    john = load_employee(seeded_unit_of_work, 1)

    snapshot = app.update_employee(
        employee_update_from(john, salary=Decimal("76000")),
        unit_of_work_factory=seeded_unit_of_work,
    )

    assert snapshot.employee.salary == Decimal("76000.00")


def test_update_project_uses_started_adapter(seeded_unit_of_work: UnitOfWorkFactory) -> None:
    beta = load_project(seeded_unit_of_work, 2)

    snapshot = app.update_project(project_update_from(beta, employee_ids=()))

    assert snapshot.employees == ()
    assert load_project(seeded_unit_of_work, 2).employee_ids == frozenset()


def test_seed_and_report_start_the_adapter_on_demand(file_database: str) -> None:
    _ = file_database
    assert not is_started()

    app.seed_database()

    assert is_started()
    top = app.run_report(lambda queries: queries.top_paid_employees(1))
    assert [employee.full_name for employee in top] == ["Frank Miller"]
