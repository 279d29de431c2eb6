"""Desired-state update DTOs.

Every field is required: an update describes the complete target state of one
entity, including the full set of related ids. There is no way to express
"leave this field unchanged".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

from pydantic import ValidationError

from .errors import InvalidUpdateError
from .schema import DepartmentPayload, EmployeePayload, ProjectPayload

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime
    from decimal import Decimal

    from .schema import UpdatePayload


@dataclass(slots=True, frozen=True)
class DepartmentUpdate:
    """Desired end state of a department and the employees it owns."""

    id: int
    name: str
    location: str
    budget: Decimal
    employee_ids: tuple[int, ...]

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> Self:
        return cls(**_validate(DepartmentPayload, payload))


@dataclass(slots=True, frozen=True)
class EmployeeUpdate:
    """Desired end state of an employee, its department and its projects."""

    id: int
    first_name: str
    last_name: str
    email: str
    salary: Decimal
    hire_date: datetime
    department_id: int
    project_ids: tuple[int, ...]

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> Self:
        return cls(**_validate(EmployeePayload, payload))


@dataclass(slots=True, frozen=True)
class ProjectUpdate:
    """Desired end state of a project and its assigned employees.

    ``end_date=None`` clears a previously stored end date.
    """

    id: int
    name: str
    description: str
    start_date: datetime
    end_date: datetime | None
    budget: Decimal
    employee_ids: tuple[int, ...]

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> Self:
        return cls(**_validate(ProjectPayload, payload))


def _validate(schema: type[UpdatePayload], payload: Mapping[str, object]) -> dict[str, Any]:
    try:
        model = schema.model_validate(dict(payload))
    except ValidationError as exc:
        raise InvalidUpdateError(f"Invalid {schema.__name__}: {exc}") from exc
    return dict(model)
