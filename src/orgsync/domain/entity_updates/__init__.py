"""Desired-state entity update subsystem."""

from __future__ import annotations

from .apply import apply_department_update, apply_employee_update, apply_project_update
from .dto import DepartmentUpdate, EmployeeUpdate, ProjectUpdate
from .errors import (
    InvalidUpdateError,
    MissingReferenceError,
    NotFoundError,
    OrphanedEmployeesError,
    ReconciliationError,
)
from .reconcile import (
    UnitOfWorkFactory,
    reconcile_department,
    reconcile_employee,
    reconcile_project,
)
from .resolve import resolve_reference, resolve_references
from .schema import Amount, UtcDatetime
from .snapshot import (
    DepartmentSnapshot,
    EmployeeSnapshot,
    ProjectSnapshot,
    read_department_snapshot,
    read_employee_snapshot,
    read_project_snapshot,
)

__all__ = [
    "Amount",
    "DepartmentSnapshot",
    "DepartmentUpdate",
    "EmployeeSnapshot",
    "EmployeeUpdate",
    "InvalidUpdateError",
    "MissingReferenceError",
    "NotFoundError",
    "OrphanedEmployeesError",
    "ProjectSnapshot",
    "ProjectUpdate",
    "ReconciliationError",
    "UnitOfWorkFactory",
    "UtcDatetime",
    "apply_department_update",
    "apply_employee_update",
    "apply_project_update",
    "read_department_snapshot",
    "read_employee_snapshot",
    "read_project_snapshot",
    "reconcile_department",
    "reconcile_employee",
    "reconcile_project",
    "resolve_reference",
    "resolve_references",
]
