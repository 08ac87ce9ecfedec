"""
Storage Layer

Repository capability protocols plus in-memory and PostgreSQL backends.

Usage:
    from src.common.storage import InMemorySluggedRepository, SluggedEntity

    repo = InMemorySluggedRepository([SluggedEntity(id=..., slug="acme")])
"""

from src.common.storage.memory import InMemorySluggedRepository
from src.common.storage.models import SluggedEntity
from src.common.storage.protocols import CanReadId, CanReadSlug, SluggedEntityRepository

__all__ = [
    "CanReadId",
    "CanReadSlug",
    "InMemorySluggedRepository",
    "SluggedEntity",
    "SluggedEntityRepository",
]
