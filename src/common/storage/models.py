"""
Storage Models

Entity shape used by the bundled repository backends.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SluggedEntity:
    """
    An entity addressable by canonical ID or by slug.

    Columns other than id/slug/name are kept in attributes.
    """

    id: str
    slug: str
    name: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "slug": self.slug,
            "name": self.name,
            "attributes": dict(self.attributes),
        }

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        id_column: str = "id",
        slug_column: str = "slug",
    ) -> SluggedEntity:
        """Create from a database row or any mapping."""
        known = {id_column, slug_column, "name"}
        return cls(
            id=str(record[id_column]),
            slug=record[slug_column],
            name=record.get("name"),
            attributes={k: v for k, v in record.items() if k not in known},
        )
