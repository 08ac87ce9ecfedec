"""
Database adapter for entity lookup.

Opens the asyncpg pool used by PostgresSluggedRepository and reports
whether the lookup table is reachable.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

logger = logging.getLogger(__name__)


async def create_db_pool(
    postgres_url: str,
    min_size: int = 1,
    max_size: int = 5,
) -> asyncpg.Pool:
    """
    Create a PostgreSQL connection pool.

    Args:
        postgres_url: Connection URL
        min_size: Minimum connections
        max_size: Maximum connections
    """
    logger.info(f"Opening lookup pool on {postgres_url} (min={min_size}, max={max_size})")
    return await asyncpg.create_pool(
        postgres_url,
        min_size=min_size,
        max_size=max_size,
    )


async def check_db_health(pool: asyncpg.Pool, table: str | None = None) -> dict[str, Any]:
    """
    Check that the database answers and, optionally, that a table exists.

    Args:
        pool: asyncpg connection pool
        table: Lookup table to look for (optionally schema-qualified)

    Returns:
        Status dict with "connected", plus "table_exists" when a table is
        given. "connected" is False on connection or server errors.
    """
    try:
        async with pool.acquire() as conn:
            status: dict[str, Any] = {"connected": True, "pool_size": pool.get_size()}
            if table is not None:
                # to_regclass yields NULL instead of raising for unknown names
                status["table"] = table
                status["table_exists"] = await conn.fetchval(
                    "SELECT to_regclass($1) IS NOT NULL", table
                )
            return status
    except (OSError, asyncpg.PostgresError) as e:
        logger.error(f"Lookup database unreachable: {e}")
        return {"connected": False, "error": str(e)}
