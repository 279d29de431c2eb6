"""Repository implementations backed by SQLAlchemy sessions.

Rows are read with Core statements and turned into detached domain dataclasses.
``save`` writes scalar columns with an UPDATE (INSERT when the row is new) and
rewrites the entity's edges, all inside the session's current transaction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import delete, insert, select, update

from orgsync.adapters.sqlalchemy.mappings import (
    department_table,
    employee_project_table,
    employee_table,
    project_table,
)
from orgsync.domain.model import Department, Employee, Entity, Project

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlalchemy import CursorResult, Row, Table
    from sqlalchemy.orm import Session


class SqlAlchemyRepository[TEntity: Entity](ABC):
    """Shared read/write plumbing for tables keyed by an integer ``id``."""

    table: Table

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, entity_id: int, *, for_update: bool = False) -> TEntity | None:
        stmt = select(self.table).where(self.table.c.id == entity_id)
        if for_update:
            stmt = stmt.with_for_update()
        row = self.session.execute(stmt).one_or_none()
        if row is None:
            return None
        return self.hydrate([row])[0]

    def get_many(self, entity_ids: Iterable[int]) -> list[TEntity]:
        ids = sorted(set(entity_ids))
        if not ids:
            return []
        stmt = select(self.table).where(self.table.c.id.in_(ids)).order_by(self.table.c.id)
        return self.hydrate(self.session.execute(stmt).all())

    def list_all(self) -> list[TEntity]:
        stmt = select(self.table).order_by(self.table.c.id)
        return self.hydrate(self.session.execute(stmt).all())

    def save(self, entity: TEntity) -> None:
        values = self._scalar_values(entity)
        stmt = update(self.table).where(self.table.c.id == entity.id).values(**values)
        result = cast("CursorResult[Any]", self.session.execute(stmt))
        if result.rowcount == 0:
            self.session.execute(insert(self.table).values(id=entity.id, **values))
        self._write_edges(entity)

    def hydrate(self, rows: Sequence[Row[Any]]) -> list[TEntity]:
        """Build entities from rows of ``table``, keeping the row order."""

        if not rows:
            return []
        edges = self._load_edges([row.id for row in rows])
        return [self._from_row(row, edges.get(row.id, frozenset())) for row in rows]

    @abstractmethod
    def _from_row(self, row: Row[Any], edges: frozenset[int]) -> TEntity: ...

    @abstractmethod
    def _scalar_values(self, entity: TEntity) -> dict[str, object]: ...

    @abstractmethod
    def _load_edges(self, entity_ids: list[int]) -> dict[int, frozenset[int]]: ...

    @abstractmethod
    def _write_edges(self, entity: TEntity) -> None: ...

    def _edge_map(self, stmt: Any) -> dict[int, frozenset[int]]:
        grouped: defaultdict[int, set[int]] = defaultdict(set)
        for owner_id, target_id in self.session.execute(stmt).all():
            grouped[owner_id].add(target_id)
        return {owner_id: frozenset(targets) for owner_id, targets in grouped.items()}


class SqlAlchemyDepartmentRepository(SqlAlchemyRepository[Department]):
    table = department_table

    def _from_row(self, row: Row[Any], edges: frozenset[int]) -> Department:
        return Department(
            id=row.id,
            name=row.name,
            location=row.location,
            budget=row.budget,
            employee_ids=edges,
        )

    def _scalar_values(self, entity: Department) -> dict[str, object]:
        return {"name": entity.name, "location": entity.location, "budget": entity.budget}

    def _load_edges(self, entity_ids: list[int]) -> dict[int, frozenset[int]]:
        stmt = select(employee_table.c.department_id, employee_table.c.id).where(
            employee_table.c.department_id.in_(entity_ids)
        )
        return self._edge_map(stmt)

    def _write_edges(self, entity: Department) -> None:
        # employee.department_id is the edge: re-parent, never detach
        if not entity.employee_ids:
            return
        stmt = (
            update(employee_table)
            .where(employee_table.c.id.in_(sorted(entity.employee_ids)))
            .values(department_id=entity.id)
        )
        self.session.execute(stmt)


class SqlAlchemyEmployeeRepository(SqlAlchemyRepository[Employee]):
    table = employee_table

    def _from_row(self, row: Row[Any], edges: frozenset[int]) -> Employee:
        return Employee(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            salary=row.salary,
            hire_date=row.hire_date,
            department_id=row.department_id,
            project_ids=edges,
        )

    def _scalar_values(self, entity: Employee) -> dict[str, object]:
        return {
            "first_name": entity.first_name,
            "last_name": entity.last_name,
            "email": entity.email,
            "salary": entity.salary,
            "hire_date": entity.hire_date,
            "department_id": entity.department_id,
        }

    def _load_edges(self, entity_ids: list[int]) -> dict[int, frozenset[int]]:
        stmt = select(
            employee_project_table.c.employee_id, employee_project_table.c.project_id
        ).where(employee_project_table.c.employee_id.in_(entity_ids))
        return self._edge_map(stmt)

    def _write_edges(self, entity: Employee) -> None:
        self.session.execute(
            delete(employee_project_table).where(
                employee_project_table.c.employee_id == entity.id
            )
        )
        if entity.project_ids:
            self.session.execute(
                insert(employee_project_table),
                [
                    {"employee_id": entity.id, "project_id": project_id}
                    for project_id in sorted(entity.project_ids)
                ],
            )


class SqlAlchemyProjectRepository(SqlAlchemyRepository[Project]):
    table = project_table

    def _from_row(self, row: Row[Any], edges: frozenset[int]) -> Project:
        return Project(
            id=row.id,
            name=row.name,
            description=row.description,
            start_date=row.start_date,
            end_date=row.end_date,
            budget=row.budget,
            employee_ids=edges,
        )

    def _scalar_values(self, entity: Project) -> dict[str, object]:
        return {
            "name": entity.name,
            "description": entity.description,
            "start_date": entity.start_date,
            "end_date": entity.end_date,
            "budget": entity.budget,
        }

    def _load_edges(self, entity_ids: list[int]) -> dict[int, frozenset[int]]:
        stmt = select(
            employee_project_table.c.project_id, employee_project_table.c.employee_id
        ).where(employee_project_table.c.project_id.in_(entity_ids))
        return self._edge_map(stmt)

    def _write_edges(self, entity: Project) -> None:
        self.session.execute(
            delete(employee_project_table).where(employee_project_table.c.project_id == entity.id)
        )
        if entity.employee_ids:
            self.session.execute(
                insert(employee_project_table),
                [
                    {"employee_id": employee_id, "project_id": entity.id}
                    for employee_id in sorted(entity.employee_ids)
                ],
            )


if TYPE_CHECKING:
    from orgsync.domain.ports.persistence import (
        DepartmentRepository,
        EmployeeRepository,
        ProjectRepository,
    )

    _session_stub = cast("Session", object())
    _department_repo: DepartmentRepository = SqlAlchemyDepartmentRepository(_session_stub)
    _employee_repo: EmployeeRepository = SqlAlchemyEmployeeRepository(_session_stub)
    _project_repo: ProjectRepository = SqlAlchemyProjectRepository(_session_stub)
