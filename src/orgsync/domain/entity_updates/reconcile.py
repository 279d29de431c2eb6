"""Reconcile persisted entities with a desired end state.

Each reconciler runs inside exactly one unit of work:

1. load the target entity (locked for update where the store supports it);
2. resolve every referenced id before touching anything;
3. apply the DTO to the loaded entity (full overwrite, edge sets replaced);
4. ``save`` explicitly, re-read the snapshot and commit.

Any failure propagates out of the ``with`` block, which rolls the unit of work
back, so rejected updates never leave partial writes behind.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from orgsync.domain.model import EntityType

from .apply import apply_department_update, apply_employee_update, apply_project_update
from .errors import NotFoundError, OrphanedEmployeesError, ReconciliationError
from .resolve import resolve_reference, resolve_references
from .snapshot import read_department_snapshot, read_employee_snapshot, read_project_snapshot

if TYPE_CHECKING:
    from collections.abc import Callable

    from orgsync.domain.model import Entity
    from orgsync.domain.ports import OrganizationUnitOfWork, Repository

    from .dto import DepartmentUpdate, EmployeeUpdate, ProjectUpdate
    from .snapshot import DepartmentSnapshot, EmployeeSnapshot, ProjectSnapshot

type UnitOfWorkFactory = Callable[[], OrganizationUnitOfWork]

log = logging.getLogger(__name__)


def reconcile_employee(
    update: EmployeeUpdate,
    *,
    unit_of_work_factory: UnitOfWorkFactory,
) -> EmployeeSnapshot:
    """Make employee ``update.id`` match ``update`` exactly."""

    log.debug(
        "Reconciling employee %s: department=%s, projects=%s",
        update.id,
        update.department_id,
        sorted(set(update.project_ids)),
    )
    try:
        with unit_of_work_factory() as uow:
            repositories = uow.repositories
            employee = _load(repositories.employees, EntityType.EMPLOYEE, update.id)
            department = resolve_reference(
                repositories.departments, EntityType.DEPARTMENT, update.department_id
            )
            projects = resolve_references(
                repositories.projects, EntityType.PROJECT, update.project_ids
            )

            previous_department_id = employee.department_id
            apply_employee_update(employee, update, department=department, projects=projects)
            repositories.employees.save(employee)

            snapshot = read_employee_snapshot(repositories, employee.id)
            uow.commit()
    except ReconciliationError as exc:
        log.warning("Rejected employee %s update: %s", update.id, exc)
        raise

    if previous_department_id != department.id:
        log.info(
            "Moved employee %s from department %s to %s",
            update.id,
            previous_department_id,
            department.id,
        )
    log.info("Reconciled employee %s: projects=%s", update.id, list(snapshot.project_ids))
    return snapshot


def reconcile_project(
    update: ProjectUpdate,
    *,
    unit_of_work_factory: UnitOfWorkFactory,
) -> ProjectSnapshot:
    """Make project ``update.id`` match ``update`` exactly."""

    log.debug(
        "Reconciling project %s: employees=%s", update.id, sorted(set(update.employee_ids))
    )
    try:
        with unit_of_work_factory() as uow:
            repositories = uow.repositories
            project = _load(repositories.projects, EntityType.PROJECT, update.id)
            employees = resolve_references(
                repositories.employees, EntityType.EMPLOYEE, update.employee_ids
            )

            apply_project_update(project, update, employees=employees)
            repositories.projects.save(project)

            snapshot = read_project_snapshot(repositories, project.id)
            uow.commit()
    except ReconciliationError as exc:
        log.warning("Rejected project %s update: %s", update.id, exc)
        raise

    log.info("Reconciled project %s: employees=%s", update.id, list(snapshot.employee_ids))
    return snapshot


def reconcile_department(
    update: DepartmentUpdate,
    *,
    unit_of_work_factory: UnitOfWorkFactory,
) -> DepartmentSnapshot:
    """Make department ``update.id`` own exactly ``update.employee_ids``.

    Requested employees are re-parented from wherever they are. Current members
    missing from the request cannot be detached because every employee needs a
    department; that case raises ``OrphanedEmployeesError``.
    """

    log.debug(
        "Reconciling department %s: employees=%s", update.id, sorted(set(update.employee_ids))
    )
    try:
        with unit_of_work_factory() as uow:
            repositories = uow.repositories
            department = _load(repositories.departments, EntityType.DEPARTMENT, update.id)
            employees = resolve_references(
                repositories.employees, EntityType.EMPLOYEE, update.employee_ids
            )

            orphaned = department.employee_ids - {employee.id for employee in employees}
            if orphaned:
                raise OrphanedEmployeesError(department.id, orphaned)

            moved_in = [e.id for e in employees if e.department_id != department.id]
            apply_department_update(department, update, employees=employees)
            repositories.departments.save(department)

            snapshot = read_department_snapshot(repositories, department.id)
            uow.commit()
    except ReconciliationError as exc:
        log.warning("Rejected department %s update: %s", update.id, exc)
        raise

    if moved_in:
        log.info("Re-parented employees %s into department %s", moved_in, update.id)
    log.info("Reconciled department %s: employees=%s", update.id, list(snapshot.employee_ids))
    return snapshot


def _load[TEntity: Entity](
    repository: Repository[TEntity], kind: EntityType, entity_id: int
) -> TEntity:
    entity = repository.get(entity_id, for_update=True)
    if entity is None:
        raise NotFoundError(kind, entity_id)
    return entity
