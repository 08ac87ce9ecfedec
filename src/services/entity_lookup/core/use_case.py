"""
Find Entity By Type

Resolves an identifier that may be either a UUID or a slug to an entity,
dispatching to the matching repository lookup.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar, assert_never

from src.common.storage.protocols import EntityT, SluggedEntityRepository
from src.common.telemetry import trace_span

from ..exceptions import ResourceNotFoundError
from .identifiers import IdentifierKind, detect_identifier

logger = logging.getLogger(__name__)

RepositoryT = TypeVar("RepositoryT", bound=SluggedEntityRepository)


class FindEntityByTypeUseCase(Generic[EntityT, RepositoryT]):
    """
    Look up a single entity by UUID or slug.

    The identifier's shape picks the lookup: canonical UUIDs go to
    ``find_by_id``, everything else to ``find_by_slug`` (or the other way
    round for non-UUIDs when ``default_kind`` is UUID). Exactly one
    repository call is made per ``run``.

    Example:
        use_case = FindEntityByTypeUseCase(widget_repository)
        widget = await use_case.run("blue-widget", "Widget")
    """

    def __init__(
        self,
        repository: RepositoryT,
        default_kind: IdentifierKind = IdentifierKind.SLUG,
    ):
        self._repository = repository
        self._default_kind = default_kind

    @property
    def repository(self) -> RepositoryT:
        return self._repository

    async def run(self, identifier: str, source_name: str) -> EntityT:
        """
        Resolve an identifier to an entity.

        Args:
            identifier: UUID or slug, as supplied by the caller
            source_name: Entity kind used in the not-found error (e.g. "Widget")

        Returns:
            The entity exactly as returned by the repository

        Raises:
            ResourceNotFoundError: If the selected lookup finds nothing
        """
        kind = detect_identifier(identifier, self._default_kind)

        with trace_span(
            "entity_lookup.resolve",
            {"entity.source": source_name, "identifier.kind": kind.value},
        ):
            logger.debug(f"Resolving {source_name} by {kind.value}")

            match kind:
                case IdentifierKind.UUID:
                    entity = await self._repository.find_by_id(identifier)
                case IdentifierKind.SLUG:
                    entity = await self._repository.find_by_slug(identifier)
                case _:
                    assert_never(kind)

            if entity is None:
                logger.info(f"{source_name} not found by {kind.value}")
                raise ResourceNotFoundError(source_name)

            return entity
