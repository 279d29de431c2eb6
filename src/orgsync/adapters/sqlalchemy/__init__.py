"""SQLAlchemy adapter package for orgsync."""

from __future__ import annotations

from .mappings import (
    Money,
    UTCDateTime,
    create_all_tables,
    department_table,
    employee_project_table,
    employee_table,
    enable_sqlite_foreign_keys,
    metadata,
    project_table,
)
from .queries import SqlAlchemyOrganizationQueries
from .repositories import (
    SqlAlchemyDepartmentRepository,
    SqlAlchemyEmployeeRepository,
    SqlAlchemyProjectRepository,
)
from .seed import seed_sample_data
from .unit_of_work import SqlAlchemyUnitOfWork, StartupError, shutdown, startup

__all__ = [
    "Money",
    "SqlAlchemyDepartmentRepository",
    "SqlAlchemyEmployeeRepository",
    "SqlAlchemyOrganizationQueries",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyUnitOfWork",
    "StartupError",
    "UTCDateTime",
    "create_all_tables",
    "department_table",
    "employee_project_table",
    "employee_table",
    "enable_sqlite_foreign_keys",
    "metadata",
    "project_table",
    "seed_sample_data",
    "shutdown",
    "startup",
]
