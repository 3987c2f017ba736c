"""In-memory confession repository for testing."""

import random
from typing import Optional

from confess.domain.model.confession import Confession
from confess.domain.repository.confession import ConfessionRepository
from confess.domain.value import ConfessionId, ReactionType


class InMemoryConfessionRepository(ConfessionRepository):
    """In-memory implementation of ConfessionRepository for testing.

    Methods never suspend between reading and writing, so each call is
    atomic with respect to other coroutines on the same event loop.
    """

    def __init__(self) -> None:
        self._confessions: dict[ConfessionId, Confession] = {}

    async def save(self, confession: Confession) -> Confession:
        """Save a confession."""
        self._confessions[confession.id] = confession
        return confession

    async def find_by_id(self, confession_id: ConfessionId) -> Optional[Confession]:
        """Find a confession by ID."""
        return self._confessions.get(confession_id)

    async def sample(self, size: int) -> list[Confession]:
        """Pick up to ``size`` confessions at random."""
        confessions = list(self._confessions.values())
        return random.sample(confessions, min(size, len(confessions)))

    async def find_by_tag(self, tag: str) -> list[Confession]:
        """Find confessions carrying a tag, in insertion order."""
        return [c for c in self._confessions.values() if tag in c.tags]

    async def add_reaction(
        self,
        confession_id: ConfessionId,
        reaction_type: ReactionType,
        user_id: str,
    ) -> Optional[Confession]:
        """Increment a counter and record the reactor unless already present."""
        confession = self._confessions.get(confession_id)
        if confession is None or confession.reactions.has_reacted(user_id):
            return None

        updated = confession.model_copy(
            update={
                "reactions": confession.reactions.with_reaction(
                    reaction_type, user_id
                )
            }
        )
        self._confessions[confession_id] = updated
        return updated
