"""Confession domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from confess.domain.error import ValidationError
from confess.domain.model.confession import Confession, Reactions
from confess.domain.repository import ConfessionRepository
from confess.domain.value import ConfessionId

from .base import Service


class ConfessionService(Service):
    """Domain service for confession operations."""

    def __init__(self, confession_repository: ConfessionRepository) -> None:
        """Initialize confession service.

        Args:
            confession_repository: Confession repository
        """
        self.confession_repository = confession_repository

    async def create_confession(
        self, title: str | None, body: str | None, tags: list[str] | None = None
    ) -> Confession:
        """Create and persist a new confession with an empty reaction tally.

        Args:
            title: Confession title (required)
            body: Confession body (required)
            tags: Optional tag labels, order preserved

        Returns:
            Saved confession

        Raises:
            ValidationError: If title or body is missing or blank
            StorageError: If the confession could not be persisted
        """
        if not title or not title.strip():
            raise ValidationError("Title is required")
        if not body or not body.strip():
            raise ValidationError("Body is required")

        try:
            confession = Confession(
                id=ConfessionId(uuid4()),
                title=title,
                body=body,
                tags=[tag for tag in (tags or []) if tag],
                reactions=Reactions(),
                created_at=datetime.now(),
            )
        except PydanticValidationError as e:
            raise ValidationError(str(e)) from e

        with logfire.span(
            "confession_service.create_confession",
            confession_id=str(confession.id),
            tags=confession.tags,
        ):
            saved = await self.confession_repository.save(confession)
            logfire.info("Confession saved", confession_id=str(saved.id))
            return saved

    async def get_confession_by_id(
        self, confession_id: ConfessionId
    ) -> Confession | None:
        """Get a confession by ID.

        Args:
            confession_id: Confession ID

        Returns:
            Confession if found, None otherwise
        """
        with logfire.span(
            "confession_service.get_confession_by_id",
            confession_id=str(confession_id),
        ):
            confession = await self.confession_repository.find_by_id(confession_id)

            if not confession:
                logfire.warn("Confession not found", confession_id=str(confession_id))

            return confession

    async def sample_confessions(self, size: int) -> list[Confession]:
        """Pick up to ``size`` random confessions."""
        with logfire.span("confession_service.sample_confessions", size=size):
            confessions = await self.confession_repository.sample(size)
            logfire.info("Confessions sampled", count=len(confessions))
            return confessions

    async def get_confessions_by_tag(self, tag: str) -> list[Confession]:
        """Get every confession carrying ``tag``."""
        with logfire.span("confession_service.get_confessions_by_tag", tag=tag):
            confessions = await self.confession_repository.find_by_tag(tag)
            logfire.info("Confessions found by tag", tag=tag, count=len(confessions))
            return confessions
