"""Apply desired-state DTOs to domain entities.

These functions only mutate the in-memory entity. Related entities must be
resolved beforehand so that a failed lookup never leaves a half-applied entity
behind; persistence is the caller's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from orgsync.domain.model import Department, Employee, Entity, Project

    from .dto import DepartmentUpdate, EmployeeUpdate, ProjectUpdate


def apply_employee_update(
    employee: Employee,
    update: EmployeeUpdate,
    *,
    department: Department,
    projects: Iterable[Project],
) -> Employee:
    """Overwrite every employee field and replace its department and project edges."""

    _check_identity(employee, update.id)
    employee.first_name = update.first_name
    employee.last_name = update.last_name
    employee.email = update.email
    employee.salary = update.salary
    employee.hire_date = update.hire_date
    employee.department_id = department.id
    employee.project_ids = _edge_set(projects)
    return employee


def apply_project_update(
    project: Project,
    update: ProjectUpdate,
    *,
    employees: Iterable[Employee],
) -> Project:
    """Overwrite every project field (``end_date`` included) and its employee edges."""

    _check_identity(project, update.id)
    project.name = update.name
    project.description = update.description
    project.start_date = update.start_date
    project.end_date = update.end_date
    project.budget = update.budget
    project.employee_ids = _edge_set(employees)
    return project


def apply_department_update(
    department: Department,
    update: DepartmentUpdate,
    *,
    employees: Iterable[Employee],
) -> Department:
    """Overwrite every department field and the set of employees it owns."""

    _check_identity(department, update.id)
    department.name = update.name
    department.location = update.location
    department.budget = update.budget
    department.employee_ids = _edge_set(employees)
    return department


def _edge_set(targets: Iterable[Entity]) -> frozenset[int]:
    return frozenset(target.id for target in targets)


def _check_identity(entity: Entity, update_id: int) -> None:
    if entity.id != update_id:
        raise ValueError(f"update for {entity.entity_type} {update_id} applied to id {entity.id}")
