"""Deterministic sample organization used by the CLI and the test-suite."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from orgsync.domain.model import Department, Employee, Project

if TYPE_CHECKING:
    from orgsync.domain.entity_updates import UnitOfWorkFactory

log = logging.getLogger(__name__)


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=UTC)


def sample_departments() -> list[Department]:
    return [
        Department(id=1, name="Engineering", location="Building A", budget=Decimal("500000.00")),
        Department(id=2, name="Marketing", location="Building B", budget=Decimal("200000.00")),
        Department(id=3, name="Sales", location="Building C", budget=Decimal("300000.00")),
        Department(id=4, name="HR", location="Building D", budget=Decimal("150000.00")),
    ]


def sample_projects() -> list[Project]:
    return [
        Project(
            id=1,
            name="Project Alpha",
            description="First major project",
            start_date=_utc(2023, 1, 1),
            end_date=None,
            budget=Decimal("100000.00"),
        ),
        Project(
            id=2,
            name="Project Beta",
            description="Second project",
            start_date=_utc(2023, 3, 1),
            end_date=_utc(2023, 12, 31),
            budget=Decimal("150000.00"),
        ),
        Project(
            id=3,
            name="Project Gamma",
            description="Research initiative",
            start_date=_utc(2023, 6, 1),
            end_date=None,
            budget=Decimal("200000.00"),
        ),
    ]


def sample_employees() -> list[Employee]:
    rows: list[tuple[int, str, str, str, datetime, int, frozenset[int]]] = [
        (1, "John", "Doe", "75000", _utc(2020, 1, 15), 1, frozenset()),
        (2, "Jane", "Smith", "85000", _utc(2019, 3, 20), 1, frozenset({1, 2})),
        (3, "Bob", "Johnson", "70000", _utc(2021, 6, 10), 2, frozenset({2})),
        (4, "Alice", "Williams", "65000", _utc(2020, 8, 25), 2, frozenset()),
        (5, "Charlie", "Brown", "60000", _utc(2022, 2, 14), 3, frozenset()),
        (6, "Diana", "Prince", "80000", _utc(2018, 11, 5), 3, frozenset({3})),
        (7, "Eve", "Davis", "55000", _utc(2021, 9, 30), 4, frozenset()),
        (8, "Frank", "Miller", "90000", _utc(2017, 5, 12), 1, frozenset({1, 3})),
    ]
    return [
        Employee(
            id=employee_id,
            first_name=first_name,
            last_name=last_name,
            email=f"{first_name}.{last_name}@example.com".lower(),
            salary=Decimal(salary),
            hire_date=hire_date,
            department_id=department_id,
            project_ids=project_ids,
        )
        for (
            employee_id,
            first_name,
            last_name,
            salary,
            hire_date,
            department_id,
            project_ids,
        ) in rows
    ]


def seed_sample_data(unit_of_work_factory: UnitOfWorkFactory) -> None:
    """Write the sample organization, overwriting rows with the same ids.

    Departments and projects go first so that employee foreign keys and project
    edges always point at existing rows.
    """

    departments = sample_departments()
    projects = sample_projects()
    employees = sample_employees()
    with unit_of_work_factory() as uow:
        repositories = uow.repositories
        for department in departments:
            repositories.departments.save(department)
        for project in projects:
            repositories.projects.save(project)
        for employee in employees:
            repositories.employees.save(employee)
        uow.commit()
    log.info(
        "Seeded %s departments, %s projects, %s employees",
        len(departments),
        len(projects),
        len(employees),
    )
