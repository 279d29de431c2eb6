"""Public domain model surface."""

from __future__ import annotations

from orgsync.domain.model.entity import Entity
from orgsync.domain.model.enums import EntityType
from orgsync.domain.model.organization import Department, Employee, Project

__all__ = [
    "Department",
    "Employee",
    "Entity",
    "EntityType",
    "Project",
]
