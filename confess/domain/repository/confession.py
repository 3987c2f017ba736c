"""Confession repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from confess.domain.model.confession import Confession
from confess.domain.value import ConfessionId, ReactionType


class ConfessionRepository(ABC):
    """Repository for Confession aggregate.

    Defines the contract for confession persistence operations.
    Implementations live in the persistence layer and raise
    StorageError when the backing store fails.
    """

    @abstractmethod
    async def save(self, confession: Confession) -> Confession:
        """Save a new confession.

        Args:
            confession: The confession to create

        Returns:
            The saved confession
        """
        pass

    @abstractmethod
    async def find_by_id(self, confession_id: ConfessionId) -> Optional[Confession]:
        """Find a confession by ID.

        Args:
            confession_id: The confession's unique identifier

        Returns:
            The confession if found, None otherwise
        """
        pass

    @abstractmethod
    async def sample(self, size: int) -> List[Confession]:
        """Pick up to ``size`` confessions at random.

        Args:
            size: Maximum number of confessions to return

        Returns:
            Randomly chosen confessions, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_tag(self, tag: str) -> List[Confession]:
        """Find all confessions carrying a tag.

        Args:
            tag: Tag label to match exactly

        Returns:
            Matching confessions in store order (empty if none)
        """
        pass

    @abstractmethod
    async def add_reaction(
        self,
        confession_id: ConfessionId,
        reaction_type: ReactionType,
        user_id: str,
    ) -> Optional[Confession]:
        """Atomically record a reaction unless the user already reacted.

        Increments the counter for ``reaction_type`` and adds ``user_id`` to
        the reactors in one step. Concurrent calls for the same confession
        are serialized, so the same user can never be counted twice.

        Args:
            confession_id: The confession to react to
            reaction_type: Which counter to increment
            user_id: The reacting user

        Returns:
            The updated confession, or None if the confession does not exist
            or the user has already reacted (nothing is changed in that case)
        """
        pass
