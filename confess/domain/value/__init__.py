"""Domain value objects for confessions."""

from confess.domain.value.identifiers import ConfessionId
from confess.domain.value.types import ReactionType, ReactorId

__all__ = [
    # Identifiers
    "ConfessionId",
    # Types
    "ReactionType",
    "ReactorId",
]
