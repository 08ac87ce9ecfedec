"""
Pytest configuration for unit tests.

Keeps ENTITY_LOOKUP_* variables from the developer's shell out of tests.
"""

from __future__ import annotations

import os
import uuid

import pytest

from src.common.storage import InMemorySluggedRepository, SluggedEntity


@pytest.fixture(autouse=True)
def _clean_lookup_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove lookup settings inherited from the environment."""
    for key in list(os.environ):
        if key.startswith("ENTITY_LOOKUP_"):
            monkeypatch.delenv(key)


@pytest.fixture
def widget() -> SluggedEntity:
    """A single entity with a fresh UUID."""
    return SluggedEntity(
        id=str(uuid.uuid4()),
        slug="unique-slug-example",
        name="Test Widget",
        attributes={"color": "blue"},
    )


@pytest.fixture
def widget_repo(widget: SluggedEntity) -> InMemorySluggedRepository[SluggedEntity]:
    """In-memory repository holding the widget fixture."""
    return InMemorySluggedRepository([widget])
