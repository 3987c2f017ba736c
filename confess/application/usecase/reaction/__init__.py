"""Reaction use cases."""

from .react_to_confession import ReactToConfessionRequest, ReactToConfessionUseCase

__all__ = [
    "ReactToConfessionRequest",
    "ReactToConfessionUseCase",
]
