"""
Core entity lookup logic.

Identifier classification and the lookup use case, independent of any
storage backend or transport.
"""

from .identifiers import IdentifierKind, detect_identifier, is_uuid
from .use_case import FindEntityByTypeUseCase

__all__ = ["FindEntityByTypeUseCase", "IdentifierKind", "detect_identifier", "is_uuid"]
