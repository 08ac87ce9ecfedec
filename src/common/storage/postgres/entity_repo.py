"""
PostgreSQL Slugged Entity Repository

Read access to a table of entities addressable by UUID primary key or by
a unique slug column.
"""

from __future__ import annotations

import logging
import re
import uuid
from collections.abc import Callable, Mapping
from typing import Any, Generic

import asyncpg

from src.common.storage.models import SluggedEntity
from src.common.storage.protocols import EntityT

logger = logging.getLogger(__name__)

_SQL_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?")


def _check_identifier(name: str) -> str:
    if not _SQL_IDENTIFIER.fullmatch(name):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return name


class PostgresSluggedRepository(Generic[EntityT]):
    """
    PostgreSQL implementation of SluggedEntityRepository.

    Table and column names are interpolated into SQL, so they are
    validated as plain identifiers at construction time. Lookup values
    are always passed as query parameters.
    """

    def __init__(
        self,
        pool: asyncpg.Pool,
        table: str = "entities",
        id_column: str = "id",
        slug_column: str = "slug",
        row_mapper: Callable[[Mapping[str, Any]], EntityT] | None = None,
        parse_uuid: bool = True,
    ):
        """
        Initialize repository with connection pool.

        Args:
            pool: asyncpg connection pool
            table: Table name, optionally schema-qualified
            id_column: UUID primary key column
            slug_column: Unique slug column
            row_mapper: Converts a row to an entity (defaults to SluggedEntity)
            parse_uuid: Require IDs to be UUIDs; disable for tables keyed by
                free-form text
        """
        self.pool = pool
        self._table = _check_identifier(table)
        self._id_column = _check_identifier(id_column)
        self._slug_column = _check_identifier(slug_column)
        self._row_mapper = row_mapper or self._default_mapper
        self._parse_uuid = parse_uuid

    def _default_mapper(self, row: Mapping[str, Any]) -> Any:
        return SluggedEntity.from_record(row, self._id_column, self._slug_column)

    async def find_by_id(self, entity_id: str) -> EntityT | None:
        """Fetch entity by ID. Non-UUID input never matches unless parse_uuid is off."""
        eid: uuid.UUID | str = entity_id
        if self._parse_uuid:
            try:
                eid = uuid.UUID(entity_id)
            except ValueError:
                return None

        row = await self.pool.fetchrow(
            f"SELECT * FROM {self._table} WHERE {self._id_column} = $1",
            eid,
        )
        return self._row_mapper(row) if row else None

    async def find_by_slug(self, slug: str) -> EntityT | None:
        """Fetch entity by slug."""
        row = await self.pool.fetchrow(
            f"SELECT * FROM {self._table} WHERE {self._slug_column} = $1",
            slug,
        )
        return self._row_mapper(row) if row else None
