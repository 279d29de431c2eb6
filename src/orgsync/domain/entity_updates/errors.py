"""Failures raised by entity reconciliation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from orgsync.domain.model import EntityType


class ReconciliationError(RuntimeError):
    """Base class for rejected reconciliations. The store is left unchanged."""


class NotFoundError(ReconciliationError):
    """The entity addressed by the update does not exist."""

    def __init__(self, kind: EntityType, entity_id: int) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} {entity_id} not found")


class MissingReferenceError(ReconciliationError):
    """One or more requested related ids do not resolve to live entities."""

    def __init__(self, kind: EntityType, missing_ids: Iterable[int]) -> None:
        self.kind = kind
        self.missing_ids: tuple[int, ...] = tuple(sorted(set(missing_ids)))
        ids = ", ".join(str(entity_id) for entity_id in self.missing_ids)
        super().__init__(f"Unknown {kind} ids: {ids}")


class OrphanedEmployeesError(ReconciliationError):
    """A department update would leave employees without any department."""

    def __init__(self, department_id: int, employee_ids: Iterable[int]) -> None:
        self.department_id = department_id
        self.employee_ids: tuple[int, ...] = tuple(sorted(set(employee_ids)))
        ids = ", ".join(str(entity_id) for entity_id in self.employee_ids)
        super().__init__(
            f"department {department_id} would orphan employees {ids}; "
            "move them to another department first"
        )


class InvalidUpdateError(ValueError):
    """Raised when an update payload cannot be turned into a desired-state DTO."""
