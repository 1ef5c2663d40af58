"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from huddle.domain.error import ConflictError, NotFoundError
from huddle.domain.model import Comment, CommentPatch
from huddle.domain.repository import CommentRepository
from huddle.domain.value import CommentId, EventId
from huddle.persistence.errors import translate_errors
from huddle.persistence.mappers import (
    attachments_to_json,
    comment_to_dict,
    row_to_comment,
)
from huddle.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(self, comment: Comment) -> Comment:
        """Persist a new comment."""
        comment.check_invariants()

        with translate_errors("comments.insert"):
            stmt = comments_table.insert().values(**comment_to_dict(comment))
            await self.session.execute(stmt)
            await self.session.flush()

        return await self.find_by_id(comment.id) or comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        with translate_errors("comments.find_by_id"):
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_event(
        self,
        event_id: EventId,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find all comments for an event in chronological order."""
        stmt = select(comments_table).where(comments_table.c.event_id == event_id)

        if not include_deleted:
            stmt = stmt.where(comments_table.c.is_deleted.is_(False))

        stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.seq)

        with translate_errors("comments.find_by_event"):
            result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_thread(
        self,
        root_id: CommentId,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find a thread root and its replies in chronological order."""
        stmt = select(comments_table).where(
            or_(comments_table.c.id == root_id, comments_table.c.root_id == root_id)
        )

        if not include_deleted:
            stmt = stmt.where(comments_table.c.is_deleted.is_(False))

        stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.seq)

        with translate_errors("comments.find_by_thread"):
            result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def update(
        self,
        comment_id: CommentId,
        patch: CommentPatch,
        expected_version: Optional[int] = None,
    ) -> Comment:
        """Apply a partial update, guarded by the record version."""
        values = patch.model_dump(exclude_none=True)
        if patch.attachments is not None:
            values["attachments"] = attachments_to_json(patch.attachments)

        stmt = update(comments_table).where(comments_table.c.id == comment_id)
        if expected_version is not None:
            stmt = stmt.where(comments_table.c.version == expected_version)
        stmt = stmt.values(
            **values, version=comments_table.c.version + 1
        ).returning(comments_table)

        with translate_errors("comments.update"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if row is not None:
                await self.session.flush()
                return row_to_comment(row._asdict())

        # Nothing matched: either the comment is gone or someone else won
        if await self.find_by_id(comment_id) is None:
            raise NotFoundError("Comment", str(comment_id))
        raise ConflictError("Comment", str(comment_id), expected_version or 0)

    async def find_attachment_urls(self) -> set[str]:
        """Collect the URLs of every referenced attachment."""
        stmt = select(comments_table.c.attachments).where(
            func.jsonb_array_length(comments_table.c.attachments) > 0
        )
        with translate_errors("comments.find_attachment_urls"):
            result = await self.session.execute(stmt)
        return {
            item["url"] for (attachments,) in result.fetchall() for item in attachments
        }
