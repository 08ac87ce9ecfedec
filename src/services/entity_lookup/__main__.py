"""
Entity Lookup - CLI Entry Point

Usage:
    python -m src.services.entity_lookup IDENTIFIER --source NAME [options]
    python -m src.services.entity_lookup --check [options]

Examples:
    # Look up by slug
    python -m src.services.entity_lookup blue-widget --source Widget --table widgets

    # Look up by UUID against another database
    python -m src.services.entity_lookup 3fa85f64-5717-4562-b3fc-2c963f66afa6 \\
        --source Widget --postgres-url postgresql://localhost/shop

    # Look up a legacy text key stored in the ID column
    python -m src.services.entity_lookup legacy-key-42 --source Widget --default-kind UUID

    # Only check that the database is reachable
    python -m src.services.entity_lookup --check

Exit codes: 0 found (or healthy), 2 not found, 1 any other failure.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from pydantic import ValidationError

from src.common.logging import configure_sanitized_logging, get_sanitized_logger
from src.common.storage.postgres import PostgresSluggedRepository

from .adapters.database import check_db_health, create_db_pool
from .config import EntityLookupConfig
from .core.identifiers import IdentifierKind
from .core.use_case import FindEntityByTypeUseCase
from .exceptions import ResourceNotFoundError

logger = get_sanitized_logger(__name__)

EXIT_NOT_FOUND = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="python -m src.services.entity_lookup",
        description="Resolve a UUID or slug to an entity",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("identifier", nargs="?", help="UUID or slug of the entity")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only check database connectivity and exit",
    )
    parser.add_argument(
        "--source",
        default=None,
        help="Entity kind reported when nothing matches (e.g. Widget)",
    )

    # Table options
    parser.add_argument(
        "--table",
        default=None,
        help="Table to query (default: from config or 'entities')",
    )

    # Database options
    parser.add_argument(
        "--postgres-url",
        default=None,
        help="PostgreSQL connection URL",
    )

    # Classification
    parser.add_argument(
        "--default-kind",
        choices=[kind.value for kind in IdentifierKind],
        default=None,
        help="Lookup for identifiers that are not UUIDs (default: SLUG)",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (default: from config or info)",
    )

    args = parser.parse_args(argv)
    if not args.check and (args.identifier is None or args.source is None):
        parser.error("IDENTIFIER and --source are required unless --check is given")

    return args


def build_config(args: argparse.Namespace) -> EntityLookupConfig:
    """Build configuration from args and environment."""
    overrides: dict[str, Any] = {}

    if args.table:
        overrides["table"] = args.table
    if args.postgres_url:
        overrides["postgres_url"] = args.postgres_url
    if args.default_kind:
        overrides["default_kind"] = IdentifierKind(args.default_kind)
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()

    return EntityLookupConfig(**overrides)


async def run_check(config: EntityLookupConfig) -> dict[str, Any]:
    """Open a pool and report database health."""
    pool = await create_db_pool(
        config.postgres_url,
        min_size=config.postgres_pool_min,
        max_size=config.postgres_pool_max,
    )
    try:
        return await check_db_health(pool, table=config.table)
    finally:
        await pool.close()


async def run_lookup(
    config: EntityLookupConfig,
    identifier: str,
    source_name: str,
) -> dict[str, Any]:
    """Open a pool, resolve one identifier and return the entity as a dict."""
    pool = await create_db_pool(
        config.postgres_url,
        min_size=config.postgres_pool_min,
        max_size=config.postgres_pool_max,
    )
    try:
        # Text keys in the ID column only make sense when non-UUIDs are routed there
        repository = PostgresSluggedRepository(
            pool,
            table=config.table,
            id_column=config.id_column,
            slug_column=config.slug_column,
            parse_uuid=config.default_kind is IdentifierKind.SLUG,
        )
        use_case = FindEntityByTypeUseCase(repository, default_kind=config.default_kind)
        entity = await use_case.run(identifier, source_name)
        return entity.to_dict()
    finally:
        await pool.close()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ValidationError as e:
        configure_sanitized_logging()
        logger.error(f"Invalid configuration: {e}")
        return 1

    configure_sanitized_logging(config.log_level)

    if args.check:
        try:
            health = asyncio.run(run_check(config))
        except Exception as e:
            logger.exception(f"Fatal error: {e}")
            return 1

        print(json.dumps(health, indent=2))
        return 0 if health["connected"] and health.get("table_exists", False) else 1

    logger.info(f"Resolving {args.source} '{args.identifier}' from {config.table}")

    try:
        entity = asyncio.run(run_lookup(config, args.identifier, args.source))
    except ResourceNotFoundError as e:
        logger.error(str(e))
        return EXIT_NOT_FOUND
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1

    print(json.dumps(entity, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
