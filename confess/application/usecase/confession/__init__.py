"""Confession use cases."""

from .confession_item import ConfessionItem, ReactionsItem, to_confession_item
from .create_confession import (
    CreateConfessionRequest,
    CreateConfessionResponse,
    CreateConfessionUseCase,
)
from .list_confessions_by_tag import (
    ListConfessionsByTagRequest,
    ListConfessionsByTagResponse,
    ListConfessionsByTagUseCase,
)
from .list_random_confessions import (
    ListRandomConfessionsResponse,
    ListRandomConfessionsUseCase,
)

__all__ = [
    "ConfessionItem",
    "ReactionsItem",
    "to_confession_item",
    "CreateConfessionRequest",
    "CreateConfessionResponse",
    "CreateConfessionUseCase",
    "ListConfessionsByTagRequest",
    "ListConfessionsByTagResponse",
    "ListConfessionsByTagUseCase",
    "ListRandomConfessionsResponse",
    "ListRandomConfessionsUseCase",
]
