"""Read-only reporting queries over the organization store.

These sit outside the reconciliation core: they never write and run in
whatever transaction the given session is in.
"""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Integer, func, select, type_coerce

from orgsync.adapters.sqlalchemy.mappings import Money, department_table, employee_table
from orgsync.adapters.sqlalchemy.repositories import (
    SqlAlchemyDepartmentRepository,
    SqlAlchemyEmployeeRepository,
)

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from orgsync.domain.model import Department, Employee


class SqlAlchemyOrganizationQueries:
    def __init__(self, session: Session) -> None:
        self.session = session
        self._departments = SqlAlchemyDepartmentRepository(session)
        self._employees = SqlAlchemyEmployeeRepository(session)

    def employees_by_department(self, department_name: str) -> list[Employee]:
        stmt = (
            select(employee_table)
            .join(department_table, employee_table.c.department_id == department_table.c.id)
            .where(department_table.c.name == department_name)
            .order_by(employee_table.c.id)
        )
        return self._employees.hydrate(self.session.execute(stmt).all())

    def total_salary_by_department(self, department_name: str) -> Decimal:
        stmt = (
            select(func.sum(employee_table.c.salary))
            .join(department_table, employee_table.c.department_id == department_table.c.id)
            .where(department_table.c.name == department_name)
        )
        total = self.session.execute(stmt).scalar_one_or_none()
        return total if total is not None else Decimal("0.00")

    def employees_with_salary_above(self, min_salary: Decimal) -> list[Employee]:
        stmt = (
            select(employee_table)
            .where(employee_table.c.salary > min_salary)
            .order_by(employee_table.c.id)
        )
        return self._employees.hydrate(self.session.execute(stmt).all())

    def employees_hired_in_year(self, year: int) -> list[Employee]:
        start = datetime(year, 1, 1, tzinfo=UTC)
        end = datetime(year + 1, 1, 1, tzinfo=UTC)
        stmt = (
            select(employee_table)
            .where(employee_table.c.hire_date >= start)
            .where(employee_table.c.hire_date < end)
            .order_by(employee_table.c.hire_date, employee_table.c.id)
        )
        return self._employees.hydrate(self.session.execute(stmt).all())

    def department_with_highest_budget(self) -> Department | None:
        stmt = (
            select(department_table)
            .order_by(department_table.c.budget.desc(), department_table.c.id)
            .limit(1)
        )
        rows = self.session.execute(stmt).all()
        departments = self._departments.hydrate(rows)
        return departments[0] if departments else None

    def employees_hired_between(self, start: datetime, end: datetime) -> list[Employee]:
        """Employees hired strictly after ``start`` and strictly before ``end``."""

        stmt = (
            select(employee_table)
            .where(employee_table.c.hire_date > start)
            .where(employee_table.c.hire_date < end)
            .order_by(employee_table.c.hire_date, employee_table.c.id)
        )
        return self._employees.hydrate(self.session.execute(stmt).all())

    def top_paid_employees(self, count: int) -> list[Employee]:
        if count < 0:
            raise ValueError("count must be non-negative")
        stmt = (
            select(employee_table)
            .order_by(employee_table.c.salary.desc(), employee_table.c.id)
            .limit(count)
        )
        return self._employees.hydrate(self.session.execute(stmt).all())

    def departments_with_average_salary_above(self, min_average: Decimal) -> list[Department]:
        # compare in cents: avg() loses the Money column type
        average_cents = func.avg(type_coerce(employee_table.c.salary, Integer))
        matching_ids = (
            select(employee_table.c.department_id)
            .group_by(employee_table.c.department_id)
            .having(average_cents > Money.to_cents(min_average))
        )
        stmt = (
            select(department_table)
            .where(department_table.c.id.in_(matching_ids))
            .order_by(department_table.c.id)
        )
        return self._departments.hydrate(self.session.execute(stmt).all())
