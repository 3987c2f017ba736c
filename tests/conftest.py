"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from confess.domain.model import Confession, Reactions
from confess.domain.value import ConfessionId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_confession(
    title: str = "Test Confession",
    body: str = "I never read the terms and conditions.",
    tags: list[str] | None = None,
    reactions: Reactions | None = None,
) -> Confession:
    """Helper function to build a confession with sensible defaults.

    Args:
        title: Confession title
        body: Confession body
        tags: Tag labels (defaults to none)
        reactions: Reaction tally (defaults to an empty one)

    Returns:
        Confession domain model with a fresh ID
    """
    return Confession(
        id=ConfessionId(uuid4()),
        title=title,
        body=body,
        tags=tags or [],
        reactions=reactions or Reactions(),
        created_at=datetime.now(),
    )
