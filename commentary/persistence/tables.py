"""SQLAlchemy table definitions for the comment core.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", String(255), primary_key=True),  # Caller-chosen, unique
    Column("permalink", Text, nullable=True),  # Stored decoded
    Column("commentable", Boolean, nullable=False, server_default="true"),
    Column("num_comments", Integer, nullable=False, server_default="0"),
    Column("last_comment_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("num_comments >= 0", name="num_comments_non_negative"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "thread_id",
        String(255),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    # Materialized path: ids from root to direct parent
    Column("ancestors", postgresql.ARRAY(UUID), nullable=False, server_default="{}"),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("author", String(255), nullable=True),
    Column("body", Text, nullable=False, server_default=""),
    Column(
        "state",
        Enum("visible", "deleted", name="comment_state", create_type=False),
        nullable=False,
        server_default="visible",
    ),
    Column("score", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
    CheckConstraint("depth = cardinality(ancestors)", name="depth_matches_ancestors"),
)

Index("idx_comments_thread_id", comments_table.c.thread_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("voter_id", String(255), nullable=False),
    Column("value", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "voter_id", name="unique_vote"),
    CheckConstraint("value IN (-1, 1)", name="vote_value_signed_unit"),
)

Index("idx_votes_comment_id", votes_table.c.comment_id)
