"""React to confession use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from confess.application.usecase.confession import ConfessionItem, to_confession_item
from confess.domain.error import NotFoundError, ValidationError
from confess.domain.service import ReactionService
from confess.domain.value import ConfessionId, ReactorId


class ReactToConfessionRequest(BaseModel):
    """React to confession request."""

    confession_id: str  # UUID string from the path
    # Raw JSON values; anything that is not a known reaction or a non-blank
    # string is rejected by the domain, not by request parsing
    reaction_type: Any = None
    user_id: Any = None


class ReactToConfessionUseCase:
    """Use case for reacting to a confession."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize react to confession use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: ReactToConfessionRequest) -> ConfessionItem:
        """Execute react flow.

        Args:
            request: React to confession request

        Returns:
            The confession with its updated reaction tally

        Raises:
            ValidationError: If the user ID is missing or blank
            NotFoundError: If the confession does not exist
            InvalidReactionError: If the reaction type is not supported
            DuplicateReactionError: If the user already reacted
            StorageError: If the store fails
        """
        if not isinstance(request.user_id, str):
            raise ValidationError("User id is required")
        try:
            user_id = ReactorId(request.user_id)
        except PydanticValidationError:
            raise ValidationError("User id is required")

        # A malformed ID cannot reference a stored confession
        try:
            confession_id = ConfessionId(UUID(request.confession_id))
        except ValueError:
            raise NotFoundError("Confession", request.confession_id)

        confession = await self.reaction_service.react(
            confession_id, request.reaction_type, user_id
        )
        return to_confession_item(confession)
