"""Organization aggregates: departments, employees and projects.

Relationships are held as plain id sets. The foreign-key column
(``employee.department_id``) and the ``employee_project`` join table are the
single source of truth; ``Department.employee_ids`` and
``Project.employee_ids`` are views populated by the repositories.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from orgsync.domain.model.entity import Entity
from orgsync.domain.model.enums import EntityType

if TYPE_CHECKING:
    from datetime import datetime
    from decimal import Decimal


@dataclass(kw_only=True)
class Department(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.DEPARTMENT

    name: str
    location: str
    budget: Decimal
    employee_ids: frozenset[int] = field(default_factory=frozenset)


@dataclass(kw_only=True)
class Employee(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.EMPLOYEE

    first_name: str
    last_name: str
    email: str
    salary: Decimal
    hire_date: datetime
    department_id: int
    project_ids: frozenset[int] = field(default_factory=frozenset)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(kw_only=True)
class Project(Entity):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.PROJECT

    name: str
    description: str
    start_date: datetime
    end_date: datetime | None
    budget: Decimal
    employee_ids: frozenset[int] = field(default_factory=frozenset)

    @property
    def is_open(self) -> bool:
        return self.end_date is None
