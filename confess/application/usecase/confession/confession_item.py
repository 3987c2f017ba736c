"""Serialized confession shared by the confession and reaction use cases."""

from pydantic import BaseModel, ConfigDict, Field

from confess.domain.model import Confession


class ReactionsItem(BaseModel):
    """Reaction tally in responses."""

    model_config = ConfigDict(populate_by_name=True)

    love: int
    sad: int
    laugh: int
    user_reactions: list[str] = Field(alias="userReactions")


class ConfessionItem(BaseModel):
    """Confession projected to {id, title, body, tags, reactions}."""

    id: str
    title: str
    body: str
    tags: list[str]
    reactions: ReactionsItem


def to_confession_item(confession: Confession) -> ConfessionItem:
    """Project a Confession domain model onto its response shape."""
    return ConfessionItem(
        id=str(confession.id),
        title=confession.title,
        body=confession.body,
        tags=list(confession.tags),
        reactions=ReactionsItem(
            love=confession.reactions.love,
            sad=confession.reactions.sad,
            laugh=confession.reactions.laugh,
            user_reactions=list(confession.reactions.user_reactions),
        ),
    )
