"""
Identifier Classification

Decides from the literal shape of a string whether it is a canonical UUID
or a slug. Pure and total: every string maps to exactly one IdentifierKind.
"""

from __future__ import annotations

import re
from enum import Enum

# Canonical 8-4-4-4-12 textual form, any letter case
UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


class IdentifierKind(str, Enum):
    """Shapes an entity identifier can take."""

    UUID = "UUID"
    SLUG = "SLUG"


def is_uuid(value: str) -> bool:
    """Return True if value is exactly a canonical UUID string."""
    return UUID_PATTERN.fullmatch(value) is not None


def detect_identifier(
    value: str,
    default: IdentifierKind = IdentifierKind.SLUG,
) -> IdentifierKind:
    """
    Classify an identifier by its shape.

    Args:
        value: Caller-supplied identifier (any content, may be empty)
        default: Kind returned for anything that is not a canonical UUID

    Returns:
        IdentifierKind.UUID for canonical UUIDs, otherwise default
    """
    if is_uuid(value):
        return IdentifierKind.UUID

    return default
