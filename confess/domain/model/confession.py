"""Confession aggregate root.

A confession is a short anonymous text with a title, free-form tags and a
reaction tally. Title, body and tags are fixed at creation; only the
reaction tally changes afterwards.
"""

from datetime import datetime

from pydantic import Field, field_validator, model_validator

from confess.domain.model.common import DomainModel
from confess.domain.value import ConfessionId, ReactionType


class Reactions(DomainModel):
    """Reaction tally of a confession.

    Business rules:
    - Counters only ever go up
    - A user reacts at most once per confession, so every reactor is
      counted exactly once across the three counters
    """

    love: int = Field(default=0, ge=0)
    sad: int = Field(default=0, ge=0)
    laugh: int = Field(default=0, ge=0)
    user_reactions: list[str] = Field(default_factory=list)

    @field_validator("user_reactions")
    @classmethod
    def validate_unique_reactors(cls, v: list[str]) -> list[str]:
        """Reject a reactor appearing more than once."""
        if len(set(v)) != len(v):
            raise ValueError("A user can only react once")
        return v

    @model_validator(mode="after")
    def validate_counts_match_reactors(self) -> "Reactions":
        """Each reactor accounts for exactly one counted reaction."""
        total = self.love + self.sad + self.laugh
        if total != len(self.user_reactions):
            raise ValueError(
                f"Reaction counts ({total}) do not match reactors "
                f"({len(self.user_reactions)})"
            )
        return self

    def count(self, reaction_type: ReactionType) -> int:
        """Current counter value for a reaction type."""
        # Counter fields are named after the ReactionType values
        return getattr(self, reaction_type.value)

    def has_reacted(self, user_id: str) -> bool:
        """Whether the user already left a reaction."""
        return user_id in self.user_reactions

    def with_reaction(self, reaction_type: ReactionType, user_id: str) -> "Reactions":
        """Return a tally with one more reaction of the given type from user_id.

        Raises:
            ValueError: If the user already reacted
        """
        if self.has_reacted(user_id):
            raise ValueError("A user can only react once")

        return self.model_copy(
            update={
                reaction_type.value: self.count(reaction_type) + 1,
                "user_reactions": [*self.user_reactions, user_id],
            }
        )


class Confession(DomainModel):
    """Confession aggregate root."""

    id: ConfessionId
    title: str = Field(min_length=1)
    body: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    reactions: Reactions = Field(default_factory=Reactions)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_text_not_blank(self) -> "Confession":
        """Reject whitespace-only title or body."""
        if not self.title.strip():
            raise ValueError("Title is required")
        if not self.body.strip():
            raise ValueError("Body is required")
        return self
