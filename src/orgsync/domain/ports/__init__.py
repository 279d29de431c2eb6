"""Domain ports (interfaces) consumed by the reconciliation core."""

from __future__ import annotations

from .persistence import (
    DepartmentRepository,
    EmployeeRepository,
    ProjectRepository,
    Repository,
)
from .unit_of_work import (
    OrganizationRepositories,
    OrganizationUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "DepartmentRepository",
    "EmployeeRepository",
    "OrganizationRepositories",
    "OrganizationUnitOfWork",
    "ProjectRepository",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
]
