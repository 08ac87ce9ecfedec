"""PostgreSQL storage backend."""

from src.common.storage.postgres.entity_repo import PostgresSluggedRepository

__all__ = ["PostgresSluggedRepository"]
