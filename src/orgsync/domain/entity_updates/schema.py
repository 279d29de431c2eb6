"""Pydantic models describing desired-state update payloads."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictInt, StrictStr


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


# naive timestamps are read as UTC
UtcDatetime = Annotated[datetime, AfterValidator(_to_utc)]

# whole cents; 17 digits keeps the cent count inside a signed 64-bit column
Amount = Annotated[Decimal, Field(max_digits=17, decimal_places=2, allow_inf_nan=False)]

IdList = tuple[StrictInt, ...]


class UpdatePayload(BaseModel):
    """Every field is required and unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class DepartmentPayload(UpdatePayload):
    id: StrictInt
    name: StrictStr
    location: StrictStr
    budget: Amount
    employee_ids: IdList


class EmployeePayload(UpdatePayload):
    id: StrictInt
    first_name: StrictStr
    last_name: StrictStr
    email: StrictStr
    salary: Amount
    hire_date: UtcDatetime
    department_id: StrictInt
    project_ids: IdList


class ProjectPayload(UpdatePayload):
    id: StrictInt
    name: StrictStr
    description: StrictStr
    start_date: UtcDatetime
    # required, but ``null`` is a valid value that clears the end date
    end_date: UtcDatetime | None
    budget: Amount
    employee_ids: IdList
