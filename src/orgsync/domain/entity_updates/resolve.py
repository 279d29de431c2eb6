"""Resolve requested related ids to live entities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import MissingReferenceError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from orgsync.domain.model import Entity, EntityType
    from orgsync.domain.ports import Repository


def resolve_references[TEntity: Entity](
    repository: Repository[TEntity],
    kind: EntityType,
    requested_ids: Iterable[int],
) -> tuple[TEntity, ...]:
    """Return exactly one entity per distinct requested id, ordered by id.

    Duplicates in ``requested_ids`` collapse. An empty request resolves to an
    empty tuple, which callers treat as "clear the relationship". If any id is
    unknown nothing is returned and ``MissingReferenceError`` names all of them.
    """

    wanted = frozenset(requested_ids)
    if not wanted:
        return ()

    found = {entity.id: entity for entity in repository.get_many(wanted)}
    if len(found) != len(wanted):
        raise MissingReferenceError(kind, wanted - found.keys())
    return tuple(found[entity_id] for entity_id in sorted(wanted))


def resolve_reference[TEntity: Entity](
    repository: Repository[TEntity],
    kind: EntityType,
    entity_id: int,
) -> TEntity:
    """Single-entity form used for mandatory foreign keys."""

    entity = repository.get(entity_id)
    if entity is None:
        raise MissingReferenceError(kind, (entity_id,))
    return entity
