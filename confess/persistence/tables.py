"""SQLAlchemy table definitions for confessions."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# CONFESSIONS TABLE
# ============================================================================
# Reaction counters are one column per ReactionType value so that a reaction
# can be applied with a single UPDATE on the row.
confessions_table = Table(
    "confessions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=False),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("love", Integer, nullable=False, server_default="0"),
    Column("sad", Integer, nullable=False, server_default="0"),
    Column("laugh", Integer, nullable=False, server_default="0"),
    Column("user_reactions", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("love >= 0", name="check_love_non_negative"),
    CheckConstraint("sad >= 0", name="check_sad_non_negative"),
    CheckConstraint("laugh >= 0", name="check_laugh_non_negative"),
)

Index("idx_confessions_tags", confessions_table.c.tags, postgresql_using="gin")
