"""Create confession use case."""

import logfire
from pydantic import BaseModel, ConfigDict, Field

from confess.domain.service import ConfessionService


class CreateConfessionRequest(BaseModel):
    """Create confession request."""

    title: str | None = None
    body: str | None = None
    tags: list[str] = Field(default_factory=list)


class CreateConfessionResponse(BaseModel):
    """Create confession response."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    confession_id: str = Field(alias="confessionId")


class CreateConfessionUseCase:
    """Use case for creating a new confession."""

    def __init__(self, confession_service: ConfessionService) -> None:
        """Initialize create confession use case.

        Args:
            confession_service: Confession domain service
        """
        self.confession_service = confession_service

    async def execute(
        self, request: CreateConfessionRequest
    ) -> CreateConfessionResponse:
        """Execute create confession flow.

        Args:
            request: Create confession request

        Returns:
            Response carrying the new confession ID

        Raises:
            ValidationError: If title or body is missing
            StorageError: If the confession could not be persisted
        """
        with logfire.span("create_confession.execute", tags=request.tags):
            confession = await self.confession_service.create_confession(
                title=request.title,
                body=request.body,
                tags=request.tags,
            )

            logfire.info(
                "Confession created successfully", confession_id=str(confession.id)
            )

            return CreateConfessionResponse(
                message="Confession created successfully!",
                confession_id=str(confession.id),
            )
