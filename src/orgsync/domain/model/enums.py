"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityType(StrEnum):
    """Discriminator for the entity kinds the store knows about."""

    DEPARTMENT = "department"
    EMPLOYEE = "employee"
    PROJECT = "project"
