"""
In-Memory Repository Implementations

Simple dict-based storage for unit testing and local runs.
Implements the same protocols as production backends.
"""

from __future__ import annotations

from typing import Generic

from src.common.storage.protocols import EntityT


class InMemorySluggedRepository(Generic[EntityT]):
    """
    In-memory implementation of SluggedEntityRepository.

    Entities must expose ``id`` and ``slug`` attributes.
    """

    def __init__(self, entities: list[EntityT] | None = None):
        self._by_id: dict[str, EntityT] = {}
        self._by_slug: dict[str, EntityT] = {}
        for entity in entities or []:
            self.add(entity)

    def add(self, entity: EntityT) -> None:
        """
        Save or replace an entity under both of its keys.

        Any entity previously stored under the same ID or the same slug is
        removed, so each ID and each slug maps to at most one entity.
        """
        same_id = self._by_id.pop(entity.id, None)  # type: ignore[attr-defined]
        if same_id is not None:
            self._by_slug.pop(same_id.slug, None)  # type: ignore[attr-defined]
        same_slug = self._by_slug.pop(entity.slug, None)  # type: ignore[attr-defined]
        if same_slug is not None:
            self._by_id.pop(same_slug.id, None)  # type: ignore[attr-defined]
        self._by_id[entity.id] = entity  # type: ignore[attr-defined]
        self._by_slug[entity.slug] = entity  # type: ignore[attr-defined]

    async def find_by_id(self, entity_id: str) -> EntityT | None:
        """Fetch an entity by ID."""
        return self._by_id.get(entity_id)

    async def find_by_slug(self, slug: str) -> EntityT | None:
        """Fetch an entity by slug."""
        return self._by_slug.get(slug)

    def __len__(self) -> int:
        return len(self._by_id)
