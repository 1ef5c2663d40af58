"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from huddle.domain.model.comment import Comment, CommentPatch
from huddle.domain.value import CommentId, EventId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer and perform no
    authorization; that is the service's job.
    """

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Persist a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment

        Raises:
            ValidationError: If the record violates comment invariants
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, deleted or not.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_event(
        self,
        event_id: EventId,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find all comments for an event in chronological order.

        Ordered by created_at ascending; comments sharing a timestamp keep
        insertion order so tree reconstruction is deterministic.

        Args:
            event_id: The event ID
            include_deleted: Whether to include soft-deleted comments

        Returns:
            List of comments, oldest first
        """
        pass

    @abstractmethod
    async def find_by_thread(
        self,
        root_id: CommentId,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find a thread root and all of its replies in chronological order.

        Args:
            root_id: ID of the top-level comment of the thread
            include_deleted: Whether to include soft-deleted comments

        Returns:
            The root (if it matches the filter) and every comment whose
            root_id equals it, oldest first
        """
        pass

    @abstractmethod
    async def update(
        self,
        comment_id: CommentId,
        patch: CommentPatch,
        expected_version: Optional[int] = None,
    ) -> Comment:
        """Apply a partial update and bump the record version.

        Args:
            comment_id: The comment to update
            patch: Fields to change
            expected_version: Version the caller read; None skips the check

        Returns:
            The updated comment

        Raises:
            NotFoundError: If the comment does not exist
            ConflictError: If the stored version differs from expected_version
        """
        pass

    @abstractmethod
    async def find_attachment_urls(self) -> set[str]:
        """Collect the URLs of every attachment referenced by a comment.

        Returns:
            Set of attachment URLs
        """
        pass
