"""Infrastructure adapters for entity lookup."""

from .database import check_db_health, create_db_pool

__all__ = ["check_db_health", "create_db_pool"]
