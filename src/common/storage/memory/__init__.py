"""
In-Memory Storage Backend

Simple in-memory implementation for unit tests.
No external dependencies required - perfect for fast, isolated tests.
"""

from src.common.storage.memory.repositories import InMemorySluggedRepository

__all__ = ["InMemorySluggedRepository"]
