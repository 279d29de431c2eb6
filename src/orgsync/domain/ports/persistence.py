"""Ports for persisting domain aggregates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from orgsync.domain.model import Department, Employee, Entity, Project

if TYPE_CHECKING:
    from collections.abc import Iterable


@runtime_checkable
class Repository[TEntity: Entity](Protocol):
    """Minimal repository contract for a persistent aggregate store.

    Every method runs inside the transaction of the owning unit of work.
    Returned entities are detached snapshots of the rows; mutating them has no
    effect until they are handed back to ``save``.
    """

    def get(self, entity_id: int, *, for_update: bool = False) -> TEntity | None: ...

    def get_many(self, entity_ids: Iterable[int]) -> list[TEntity]: ...

    def list_all(self) -> list[TEntity]: ...

    def save(self, entity: TEntity) -> None: ...


@runtime_checkable
class DepartmentRepository(Repository[Department], Protocol):
    """Repository contract for departments.

    ``save`` re-parents every employee listed in ``employee_ids`` onto the
    department; it never detaches employees.
    """


@runtime_checkable
class EmployeeRepository(Repository[Employee], Protocol):
    """Repository contract for employees (scalars, department FK, project edges)."""


@runtime_checkable
class ProjectRepository(Repository[Project], Protocol):
    """Repository contract for projects (scalars and employee edges)."""
