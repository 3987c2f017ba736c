"""Repository interfaces for the confession domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from confess.domain.repository.confession import ConfessionRepository

__all__ = [
    "ConfessionRepository",
]
