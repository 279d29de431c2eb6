"""Unit-of-work abstractions for coordinating repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from orgsync.domain.ports.persistence import (
        DepartmentRepository,
        EmployeeRepository,
        ProjectRepository,
    )


@runtime_checkable
class RepositoryCollection(Protocol):
    """Marker protocol for groups of repositories managed together."""


@runtime_checkable
class UnitOfWork[TRepositories: RepositoryCollection](Protocol):
    """Generic unit-of-work boundary around a repository collection.

    Entering begins a transaction; leaving the block with an exception rolls it
    back. Nothing is committed unless ``commit`` is called.
    """

    @property
    def repositories(self) -> TRepositories: ...  # the repo list itself should be immutable

    def __enter__(self) -> UnitOfWork[TRepositories]: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@dataclass(slots=True)
class OrganizationRepositories(RepositoryCollection):
    """Repositories required to reconcile organization entities."""

    departments: DepartmentRepository
    employees: EmployeeRepository
    projects: ProjectRepository


type OrganizationUnitOfWork = UnitOfWork[OrganizationRepositories]
