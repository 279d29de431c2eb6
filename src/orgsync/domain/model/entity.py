"""
Base building blocks:
integer identity assigned by the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from orgsync.domain.model.enums import EntityType


@dataclass(kw_only=True)
class Entity:
    """Identity is immutable once the row exists; the core never allocates ids."""

    id: int

    # class-level discriminator; subclasses must override
    ENTITY_TYPE: ClassVar[EntityType]

    @property
    def entity_type(self) -> EntityType:
        return self.ENTITY_TYPE
