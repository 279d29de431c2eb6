"""Read-side snapshots returned by the reconcilers.

Snapshots are frozen and compare by value; they wrap live entity dataclasses
and are therefore not hashable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from orgsync.domain.model import EntityType

from .errors import NotFoundError

if TYPE_CHECKING:
    from orgsync.domain.model import Department, Employee, Entity, Project
    from orgsync.domain.ports import OrganizationRepositories


@dataclass(frozen=True, slots=True)
class EmployeeSnapshot:
    employee: Employee
    department: Department
    projects: tuple[Project, ...]

    __hash__ = None  # type: ignore[assignment]

    @property
    def project_ids(self) -> tuple[int, ...]:
        return tuple(project.id for project in self.projects)


@dataclass(frozen=True, slots=True)
class ProjectSnapshot:
    project: Project
    employees: tuple[Employee, ...]

    __hash__ = None  # type: ignore[assignment]

    @property
    def employee_ids(self) -> tuple[int, ...]:
        return tuple(employee.id for employee in self.employees)


@dataclass(frozen=True, slots=True)
class DepartmentSnapshot:
    department: Department
    employees: tuple[Employee, ...]

    __hash__ = None  # type: ignore[assignment]

    @property
    def employee_ids(self) -> tuple[int, ...]:
        return tuple(employee.id for employee in self.employees)


def read_employee_snapshot(
    repositories: OrganizationRepositories, employee_id: int
) -> EmployeeSnapshot:
    employee = repositories.employees.get(employee_id)
    if employee is None:
        raise NotFoundError(EntityType.EMPLOYEE, employee_id)
    department = repositories.departments.get(employee.department_id)
    if department is None:
        # the foreign key constraint makes this unreachable on a consistent store
        raise NotFoundError(EntityType.DEPARTMENT, employee.department_id)
    projects = repositories.projects.get_many(employee.project_ids)
    return EmployeeSnapshot(
        employee=employee,
        department=department,
        projects=_by_id(projects),
    )


def read_project_snapshot(
    repositories: OrganizationRepositories, project_id: int
) -> ProjectSnapshot:
    project = repositories.projects.get(project_id)
    if project is None:
        raise NotFoundError(EntityType.PROJECT, project_id)
    employees = repositories.employees.get_many(project.employee_ids)
    return ProjectSnapshot(project=project, employees=_by_id(employees))


def read_department_snapshot(
    repositories: OrganizationRepositories, department_id: int
) -> DepartmentSnapshot:
    department = repositories.departments.get(department_id)
    if department is None:
        raise NotFoundError(EntityType.DEPARTMENT, department_id)
    employees = repositories.employees.get_many(department.employee_ids)
    return DepartmentSnapshot(department=department, employees=_by_id(employees))


def _by_id[TEntity: Entity](
    entities: list[TEntity],
) -> tuple[TEntity, ...]:
    return tuple(sorted(entities, key=lambda entity: entity.id))
