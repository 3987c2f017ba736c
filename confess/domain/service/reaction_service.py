"""Reaction domain service."""

from typing import Any

import logfire

from confess.domain.error import (
    DuplicateReactionError,
    InvalidReactionError,
    NotFoundError,
)
from confess.domain.model.confession import Confession
from confess.domain.repository import ConfessionRepository
from confess.domain.value import ConfessionId, ReactionType, ReactorId

from .base import Service


class ReactionService(Service):
    """Domain service for reacting to confessions."""

    def __init__(self, confession_repository: ConfessionRepository) -> None:
        """Initialize reaction service.

        Args:
            confession_repository: Confession repository
        """
        self.confession_repository = confession_repository

    async def react(
        self,
        confession_id: ConfessionId,
        reaction_type: Any,
        user_id: ReactorId,
    ) -> Confession:
        """Record a user's reaction on a confession.

        Checks run in order and the first failure wins:
        1. The confession must exist
        2. The reaction type must be one of love, sad, laugh
        3. The user must not have reacted to this confession yet

        The increment itself is a single conditional update in the
        repository, so a concurrent duplicate that slips past step 3 is
        still rejected there.

        Args:
            confession_id: Confession ID
            reaction_type: Raw reaction value from the request body
            user_id: Reacting user

        Returns:
            Updated confession

        Raises:
            NotFoundError: If the confession does not exist
            InvalidReactionError: If the reaction type is not supported
            DuplicateReactionError: If the user already reacted
            StorageError: If the store fails
        """
        with logfire.span(
            "reaction_service.react",
            confession_id=str(confession_id),
            reaction_type=str(reaction_type),
            user_id=str(user_id),
        ):
            confession = await self.confession_repository.find_by_id(confession_id)
            if not confession:
                logfire.warn(
                    "Reaction on non-existent confession",
                    confession_id=str(confession_id),
                )
                raise NotFoundError("Confession", str(confession_id))

            try:
                reaction = ReactionType(reaction_type)
            except ValueError:
                logfire.warn(
                    "Invalid reaction type",
                    confession_id=str(confession_id),
                    reaction_type=str(reaction_type),
                )
                raise InvalidReactionError(str(reaction_type))

            if confession.reactions.has_reacted(user_id.root):
                logfire.warn(
                    "Duplicate reaction attempt",
                    confession_id=str(confession_id),
                    user_id=str(user_id),
                )
                raise DuplicateReactionError(str(confession_id), str(user_id))

            updated = await self.confession_repository.add_reaction(
                confession_id, reaction, user_id.root
            )
            if updated is None:
                # Lost the race against a concurrent reaction from the same user
                logfire.warn(
                    "Duplicate reaction attempt (concurrent)",
                    confession_id=str(confession_id),
                    user_id=str(user_id),
                )
                raise DuplicateReactionError(str(confession_id), str(user_id))

            logfire.info(
                "Reaction recorded",
                confession_id=str(confession_id),
                reaction_type=reaction.value,
                count=updated.reactions.count(reaction),
            )
            return updated
