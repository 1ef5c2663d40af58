"""SQLAlchemy table definitions for Huddle.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the accounts module, read-only here)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("first_name", String(100), nullable=True),
    Column("last_name", String(100), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# EVENTS TABLE (owned by the events module, read-only here)
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("starts_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COMMENTS TABLE (flat storage of bounded-depth reply trees)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    # Insertion sequence, tie-breaker for comments sharing a timestamp
    Column("seq", BigInteger, Identity(always=True), nullable=False),
    Column(
        "event_id", UUID, ForeignKey("events.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("parent_id", UUID, ForeignKey("comments.id"), nullable=True),
    Column("root_id", UUID, ForeignKey("comments.id"), nullable=True),
    Column("text", Text, nullable=False, server_default=""),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("attachments", JSONB, nullable=False, server_default="[]"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("version", Integer, nullable=False, server_default="1"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("depth >= 0 AND depth <= 3", name="comment_depth_range"),
    CheckConstraint(
        "(depth = 0) = (root_id IS NULL AND parent_id IS NULL)",
        name="comment_root_consistency",
    ),
    CheckConstraint("char_length(text) <= 1000", name="comment_text_length"),
)

Index(
    "idx_comments_event_created",
    comments_table.c.event_id,
    comments_table.c.created_at,
    comments_table.c.seq,
)
Index(
    "idx_comments_root_created",
    comments_table.c.root_id,
    comments_table.c.created_at,
    comments_table.c.seq,
)
Index("idx_comments_author_id", comments_table.c.author_id)
