"""Domain model entities."""

from confess.domain.model.confession import Confession, Reactions

__all__ = [
    "Confession",
    "Reactions",
]
