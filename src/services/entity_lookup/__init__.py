"""
Entity Lookup Service

Resolves an identifier that may be a UUID or a slug to a single entity.

Usage:
    # From the command line
    python -m src.services.entity_lookup blue-widget --source Widget --table widgets

    # Programmatic
    from src.services.entity_lookup import FindEntityByTypeUseCase

    use_case = FindEntityByTypeUseCase(repository)
    widget = await use_case.run("blue-widget", "Widget")
"""

__version__ = "0.1.0"

from .config import EntityLookupConfig, load_config
from .core.identifiers import IdentifierKind, detect_identifier, is_uuid
from .core.use_case import FindEntityByTypeUseCase
from .exceptions import EntityLookupError, ResourceNotFoundError

__all__ = [
    "EntityLookupConfig",
    "EntityLookupError",
    "FindEntityByTypeUseCase",
    "IdentifierKind",
    "ResourceNotFoundError",
    "detect_identifier",
    "is_uuid",
    "load_config",
]
