"""Domain services."""

from .base import Service
from .confession_service import ConfessionService
from .reaction_service import ReactionService

__all__ = [
    "ConfessionService",
    "ReactionService",
    "Service",
]
