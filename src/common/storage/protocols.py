"""
Repository Protocol Definitions

Uses typing.Protocol for duck-typed capability definitions.
No inheritance required - any class implementing these methods qualifies.

Lookups signal "not found" by returning None, never by raising.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

EntityT = TypeVar("EntityT")
EntityT_co = TypeVar("EntityT_co", covariant=True)


@runtime_checkable
class CanReadId(Protocol[EntityT_co]):
    """Repository that can fetch a single entity by its canonical ID."""

    async def find_by_id(self, entity_id: str) -> EntityT_co | None:
        """Fetch an entity by ID. Returns None if absent."""
        ...


@runtime_checkable
class CanReadSlug(Protocol[EntityT_co]):
    """Repository that can fetch a single entity by its slug."""

    async def find_by_slug(self, slug: str) -> EntityT_co | None:
        """Fetch an entity by slug. Returns None if absent."""
        ...


@runtime_checkable
class SluggedEntityRepository(CanReadId[EntityT_co], CanReadSlug[EntityT_co], Protocol[EntityT_co]):
    """Repository exposing both ID and slug lookups."""
