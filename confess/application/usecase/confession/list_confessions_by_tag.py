"""List confessions by tag use case."""

from pydantic import BaseModel

from confess.domain.service import ConfessionService

from .confession_item import ConfessionItem, to_confession_item


class ListConfessionsByTagRequest(BaseModel):
    """List confessions by tag request."""

    tag: str


class ListConfessionsByTagResponse(BaseModel):
    """List confessions by tag response."""

    confessions: list[ConfessionItem]


class ListConfessionsByTagUseCase:
    """Use case for listing every confession with a given tag."""

    def __init__(self, confession_service: ConfessionService) -> None:
        """Initialize list confessions by tag use case.

        Args:
            confession_service: Confession domain service
        """
        self.confession_service = confession_service

    async def execute(
        self, request: ListConfessionsByTagRequest
    ) -> ListConfessionsByTagResponse:
        """Execute the tag filter flow.

        Args:
            request: Tag to filter on

        Returns:
            Matching confessions (empty when nothing carries the tag)
        """
        confessions = await self.confession_service.get_confessions_by_tag(
            request.tag
        )
        return ListConfessionsByTagResponse(
            confessions=[to_confession_item(c) for c in confessions]
        )
