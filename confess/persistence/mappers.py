"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from confess.domain.model import Confession, Reactions
from confess.domain.value import ConfessionId


def row_to_confession(row: Dict[str, Any]) -> Confession:
    """Convert database row to Confession domain model.

    Args:
        row: Database row as dict

    Returns:
        Confession domain model
    """
    return Confession(
        id=ConfessionId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        title=row["title"],
        body=row["body"],
        tags=list(row.get("tags") or []),
        reactions=Reactions(
            love=row["love"],
            sad=row["sad"],
            laugh=row["laugh"],
            user_reactions=list(row.get("user_reactions") or []),
        ),
        created_at=row["created_at"],
    )


def confession_to_dict(confession: Confession) -> Dict[str, Any]:
    """Convert Confession domain model to database dict.

    Reaction counters are flattened into their own columns.

    Args:
        confession: Confession domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": confession.id,
        "title": confession.title,
        "body": confession.body,
        "tags": list(confession.tags),
        "love": confession.reactions.love,
        "sad": confession.reactions.sad,
        "laugh": confession.reactions.laugh,
        "user_reactions": list(confession.reactions.user_reactions),
        "created_at": confession.created_at,
    }
