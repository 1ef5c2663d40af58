"""initial_schema

Create the schema for event comments:
- Users (read-only projection of the accounts module)
- Events (read-only projection of the events module)
- Comments (flat storage of reply trees, max depth 3, JSONB attachments)

Revision ID: 3f2c9a1d7b40
Revises:
Create Date: 2026-10-19 10:12:44.518230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a1d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.create_table(
        "users",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=True),
        sa.Column("last_name", sa.String(length=100), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "events",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("starts_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "comments",
        sa.Column("id", postgresql.UUID(), nullable=False),
        sa.Column("seq", sa.BigInteger(), sa.Identity(always=True), nullable=False),
        sa.Column("event_id", postgresql.UUID(), nullable=False),
        sa.Column("author_id", postgresql.UUID(), nullable=False),
        sa.Column("parent_id", postgresql.UUID(), nullable=True),
        sa.Column("root_id", postgresql.UUID(), nullable=True),
        sa.Column("text", sa.Text(), server_default="", nullable=False),
        sa.Column("depth", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "attachments",
            postgresql.JSONB(),
            server_default=sa.text("'[]'::jsonb"),
            nullable=False,
        ),
        sa.Column("is_deleted", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("version", sa.Integer(), server_default="1", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("edited_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.CheckConstraint("depth >= 0 AND depth <= 3", name="comment_depth_range"),
        sa.CheckConstraint(
            "(depth = 0) = (root_id IS NULL AND parent_id IS NULL)",
            name="comment_root_consistency",
        ),
        sa.CheckConstraint("char_length(text) <= 1000", name="comment_text_length"),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"]),
        sa.ForeignKeyConstraint(["root_id"], ["comments.id"]),
        sa.PrimaryKeyConstraint("id"),
    )

    # Event listing and thread fetch both read in (created_at, seq) order
    op.create_index(
        "idx_comments_event_created",
        "comments",
        ["event_id", "created_at", "seq"],
    )
    op.create_index(
        "idx_comments_root_created",
        "comments",
        ["root_id", "created_at", "seq"],
    )
    op.create_index("idx_comments_author_id", "comments", ["author_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_author_id", table_name="comments")
    op.drop_index("idx_comments_root_created", table_name="comments")
    op.drop_index("idx_comments_event_created", table_name="comments")
    op.drop_table("comments")
    op.drop_table("events")
    op.drop_table("users")
