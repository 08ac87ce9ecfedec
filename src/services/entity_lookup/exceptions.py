"""
Entity Lookup Exception Hierarchy

All lookup-specific exceptions inherit from EntityLookupError.

Usage:
    from src.services.entity_lookup.exceptions import ResourceNotFoundError

    try:
        widget = await use_case.run(identifier, "Widget")
    except ResourceNotFoundError as e:
        logger.info(f"No such {e.source}")
"""

from __future__ import annotations


class EntityLookupError(Exception):
    """
    Base exception for entity lookup errors.

    Attributes:
        message: Human-readable error description
        code: Optional machine-readable error code for programmatic handling
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ResourceNotFoundError(EntityLookupError):
    """No entity of the given source matches the identifier."""

    def __init__(self, source: str) -> None:
        super().__init__(f"{source} not found", code="RESOURCE_NOT_FOUND")
        self.source = source
