"""In-memory comment repository for testing."""

from typing import Optional

from huddle.domain.error import ConflictError, NotFoundError
from huddle.domain.model.comment import Comment, CommentPatch
from huddle.domain.repository.comment import CommentRepository
from huddle.domain.value import CommentId, EventId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Dict order doubles as insertion order, so a stable sort on created_at
    keeps same-timestamp comments in the order they were inserted.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def insert(self, comment: Comment) -> Comment:
        """Persist a new comment."""
        comment.check_invariants()
        if comment.id in self._comments:
            raise ValueError(f"Comment {comment.id} already exists")
        self._comments[comment.id] = comment
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_event(
        self,
        event_id: EventId,
        include_deleted: bool = False,
    ) -> list[Comment]:
        """Find all comments for an event in chronological order."""
        comments = [c for c in self._comments.values() if c.event_id == event_id]

        # Filter deleted
        if not include_deleted:
            comments = [c for c in comments if not c.is_deleted]

        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_by_thread(
        self,
        root_id: CommentId,
        include_deleted: bool = False,
    ) -> list[Comment]:
        """Find a thread root and its replies in chronological order."""
        comments = [
            c
            for c in self._comments.values()
            if c.id == root_id or c.root_id == root_id
        ]

        # Filter deleted
        if not include_deleted:
            comments = [c for c in comments if not c.is_deleted]

        comments.sort(key=lambda c: c.created_at)
        return comments

    async def update(
        self,
        comment_id: CommentId,
        patch: CommentPatch,
        expected_version: Optional[int] = None,
    ) -> Comment:
        """Apply a partial update, guarded by the record version."""
        current = self._comments.get(comment_id)
        if current is None:
            raise NotFoundError("Comment", str(comment_id))
        if expected_version is not None and current.version != expected_version:
            raise ConflictError("Comment", str(comment_id), expected_version)

        updated = patch.apply(current)
        self._comments[comment_id] = updated
        return updated

    async def find_attachment_urls(self) -> set[str]:
        """Collect the URLs of every referenced attachment."""
        return {a.url for c in self._comments.values() for a in c.attachments}
