"""List random confessions use case."""

from pydantic import BaseModel

from confess.domain.service import ConfessionService

from .confession_item import ConfessionItem, to_confession_item


class ListRandomConfessionsResponse(BaseModel):
    """Random confessions response."""

    confessions: list[ConfessionItem]


class ListRandomConfessionsUseCase:
    """Use case for picking a handful of confessions at random."""

    def __init__(self, confession_service: ConfessionService, sample_size: int) -> None:
        """Initialize list random confessions use case.

        Args:
            confession_service: Confession domain service
            sample_size: Maximum number of confessions per response
        """
        self.confession_service = confession_service
        self.sample_size = sample_size

    async def execute(self) -> ListRandomConfessionsResponse:
        """Execute the random sampling flow.

        Returns:
            Up to ``sample_size`` confessions in no particular order
        """
        confessions = await self.confession_service.sample_confessions(
            self.sample_size
        )
        return ListRandomConfessionsResponse(
            confessions=[to_confession_item(c) for c in confessions]
        )
