"""In-memory repository implementations for testing."""

from .confession import InMemoryConfessionRepository

__all__ = [
    "InMemoryConfessionRepository",
]
