"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from orgsync.adapters.sqlalchemy.queries import SqlAlchemyOrganizationQueries
from orgsync.adapters.sqlalchemy.seed import seed_sample_data
from orgsync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from orgsync.domain.entity_updates import (
    reconcile_department,
    reconcile_employee,
    reconcile_project,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from orgsync.domain.entity_updates import (
        DepartmentSnapshot,
        DepartmentUpdate,
        EmployeeSnapshot,
        EmployeeUpdate,
        ProjectSnapshot,
        ProjectUpdate,
        UnitOfWorkFactory,
    )


log = getLogger(__name__)


def _default_unit_of_work(
    unit_of_work_factory: UnitOfWorkFactory | None,
) -> UnitOfWorkFactory:
    if unit_of_work_factory is not None:
        return unit_of_work_factory
    if not is_started():
        startup()
    return SqlAlchemyUnitOfWork


def update_employee(
    update: EmployeeUpdate,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> EmployeeSnapshot:
    """Apply an employee desired state using the configured adapters."""

    return reconcile_employee(
        update, unit_of_work_factory=_default_unit_of_work(unit_of_work_factory)
    )


def update_project(
    update: ProjectUpdate,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ProjectSnapshot:
    """Apply a project desired state using the configured adapters."""

    return reconcile_project(
        update, unit_of_work_factory=_default_unit_of_work(unit_of_work_factory)
    )


def update_department(
    update: DepartmentUpdate,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> DepartmentSnapshot:
    """Apply a department desired state using the configured adapters."""

    return reconcile_department(
        update, unit_of_work_factory=_default_unit_of_work(unit_of_work_factory)
    )


def seed_database(*, unit_of_work_factory: UnitOfWorkFactory | None = None) -> None:
    """Load the sample organization into the configured database."""

    seed_sample_data(_default_unit_of_work(unit_of_work_factory))


def run_report[T](query: Callable[[SqlAlchemyOrganizationQueries], T]) -> T:
    """Run a read-only report in its own session."""

    if not is_started():
        startup()
    with SqlAlchemyUnitOfWork() as uow:
        result = query(SqlAlchemyOrganizationQueries(uow.session))
        uow.rollback()
    return result
