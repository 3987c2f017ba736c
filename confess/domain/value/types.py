"""Domain value objects for confessions.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from confess.domain.value.common import RootValueObject


class ReactionType(str, Enum):
    """Closed set of reactions a user can leave on a confession."""

    LOVE = "love"
    SAD = "sad"
    LAUGH = "laugh"


class ReactorId(RootValueObject[str]):
    """Identifier of a user who reacts to confessions.

    Opaque text supplied by the client. Must not be empty or blank.
    """

    @field_validator("root")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Validate the identifier carries some content."""
        if not v.strip():
            raise ValueError("User id must not be empty")
        return v
