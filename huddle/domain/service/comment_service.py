"""Comment domain service."""

from collections.abc import Sequence
from uuid import uuid4

import logfire

from huddle.config import CommentSettings
from huddle.domain.error import (
    DepthExceededError,
    ForbiddenError,
    InvalidStateError,
    NotAuthenticatedError,
    NotFoundError,
    ValidationError,
)
from huddle.domain.model import Comment, CommentPatch, UserProfile
from huddle.domain.model.comment import utcnow
from huddle.domain.repository import (
    CommentRepository,
    EventRepository,
    UserRepository,
)
from huddle.domain.value import (
    AttachmentId,
    CommentId,
    EventId,
    UploadedFile,
    UserId,
)

from .attachment_service import AttachmentService
from .base import Service
from .thread_builder import (
    CommentNode,
    CommentThread,
    EventComments,
    build_thread,
    count_nodes,
    prune_deleted,
)


class CommentService(Service):
    """Domain service for threaded event comments.

    The only entry point for comment mutations: enforces depth limits,
    ownership and content presence, and keeps attachment files in step
    with comment records.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        event_repository: EventRepository,
        user_repository: UserRepository,
        attachment_service: AttachmentService,
        settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            event_repository: Event lookup
            user_repository: Author profile lookup
            attachment_service: Attachment file handling
            settings: Comment limits
        """
        self.comment_repository = comment_repository
        self.event_repository = event_repository
        self.user_repository = user_repository
        self.attachment_service = attachment_service
        self.settings = settings

    async def create_comment(
        self,
        event_id: EventId,
        author_id: UserId | None,
        text: str | None,
        parent_id: CommentId | None = None,
        uploads: Sequence[UploadedFile] = (),
    ) -> CommentNode:
        """Create a comment on an event or reply to another comment.

        Attachments are stored before the comment is inserted. If the
        insert fails, the stored files are discarded again.

        Args:
            event_id: Event ID
            author_id: Authenticated author (None if unauthenticated)
            text: Comment text, may be empty when files are attached
            parent_id: Parent comment ID for replies (None for top-level)
            uploads: Files to attach

        Returns:
            Created comment with its author profile

        Raises:
            NotAuthenticatedError: If there is no authenticated author
            ValidationError: If the comment has no content or breaks limits
            NotFoundError: If the event or parent comment does not exist
            DepthExceededError: If the reply would nest too deep
        """
        with logfire.span(
            "comment_service.create_comment",
            event_id=str(event_id),
            author_id=str(author_id) if author_id else None,
            parent_id=str(parent_id) if parent_id else None,
            upload_count=len(uploads),
        ):
            if author_id is None:
                raise NotAuthenticatedError("post comments")

            body = self._clean_text(text)
            uploads = list(uploads)
            if not body and not uploads:
                raise ValidationError("Comment must have either text or attachments")
            self._check_attachment_count(len(uploads))
            self.attachment_service.validate(uploads)

            event = await self.event_repository.find_by_id(event_id)
            if not event:
                logfire.warn("Event not found", event_id=str(event_id))
                raise NotFoundError("Event", str(event_id))

            # If replying, verify parent and derive the thread position
            depth = 0
            root_id = None
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.event_id != event_id:
                    logfire.warn(
                        "Parent comment not found in event",
                        parent_id=str(parent_id),
                        event_id=str(event_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                depth = parent.depth + 1
                if depth > self.settings.max_depth:
                    logfire.warn(
                        "Reply depth exceeded",
                        parent_id=str(parent_id),
                        parent_depth=parent.depth,
                        max_depth=self.settings.max_depth,
                    )
                    raise DepthExceededError(depth, self.settings.max_depth)
                root_id = parent.thread_root_id

            attachments = await self.attachment_service.store_all(uploads)
            try:
                comment = Comment(
                    id=CommentId(uuid4()),
                    event_id=event_id,
                    author_id=author_id,
                    text=body,
                    parent_id=parent_id,
                    root_id=root_id,
                    depth=depth,
                    attachments=attachments,
                    created_at=utcnow(),
                )
                saved = await self.comment_repository.insert(comment)
            except Exception as e:
                logfire.error(
                    "Comment insert failed, discarding stored attachments",
                    event_id=str(event_id),
                    attachment_count=len(attachments),
                    error=str(e),
                )
                await self.attachment_service.discard(attachments)
                raise

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                event_id=str(event_id),
                depth=depth,
                attachment_count=len(attachments),
            )
            return await self._with_author(saved)

    async def get_comments_for_event(self, event_id: EventId) -> EventComments:
        """Get every discussion thread of an event.

        Deleted comments stay in the tree as placeholders while they
        still have live replies.

        Args:
            event_id: Event ID

        Returns:
            Top-level comments with nested replies, and the number of
            non-deleted comments

        Raises:
            NotFoundError: If the event does not exist
        """
        with logfire.span(
            "comment_service.get_comments_for_event", event_id=str(event_id)
        ):
            event = await self.event_repository.find_by_id(event_id)
            if not event:
                logfire.warn("Event not found", event_id=str(event_id))
                raise NotFoundError("Event", str(event_id))

            comments = await self.comment_repository.find_by_event(
                event_id, include_deleted=True
            )
            authors = await self._authors(comments)
            roots = prune_deleted(build_thread(comments, authors=authors))
            total = count_nodes(roots, include_deleted=False)

            logfire.info(
                "Comments retrieved for event",
                event_id=str(event_id),
                total=total,
                threads=len(roots),
            )
            return EventComments(comments=roots, total=total)

    async def get_thread(self, comment_id: CommentId) -> CommentThread:
        """Get the whole thread a comment belongs to.

        Args:
            comment_id: Any comment of the thread

        Returns:
            The thread's top-level comment with nested replies

        Raises:
            NotFoundError: If the comment (or its thread root) does not exist
        """
        with logfire.span("comment_service.get_thread", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            root_id = comment.thread_root_id
            comments = await self.comment_repository.find_by_thread(
                root_id, include_deleted=True
            )
            authors = await self._authors(comments)
            nodes = build_thread(comments, root_id=root_id, authors=authors)

            if not nodes or nodes[0].comment.id != root_id:
                logfire.error(
                    "Thread root missing",
                    comment_id=str(comment_id),
                    root_id=str(root_id),
                )
                raise NotFoundError("Comment", str(root_id))

            root = nodes[0]
            root.replies = prune_deleted(root.replies)
            detached = prune_deleted(nodes[1:])
            total = count_nodes([root, *detached], include_deleted=False)

            logfire.info(
                "Thread retrieved",
                root_id=str(root_id),
                total=total,
                detached=len(detached),
            )
            return CommentThread(root=root, detached=detached, total=total)

    async def update_comment(
        self,
        comment_id: CommentId,
        requester_id: UserId | None,
        text: str | None = None,
        uploads: Sequence[UploadedFile] = (),
    ) -> CommentNode:
        """Edit a comment's text and append attachments.

        Args:
            comment_id: Comment ID
            requester_id: Authenticated user (must be the author)
            text: New text; None or blank keeps the current text
            uploads: Files to append to the existing attachments

        Returns:
            Updated comment with its author profile

        Raises:
            NotAuthenticatedError: If there is no authenticated requester
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
            InvalidStateError: If the comment is deleted
            ValidationError: If the result would have no content
            ConflictError: If the comment changed concurrently
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id) if requester_id else None,
            upload_count=len(uploads),
        ):
            if requester_id is None:
                raise NotAuthenticatedError("edit comments")

            comment = await self._get_owned(comment_id, requester_id, "edit")

            new_text = self._clean_text(text) or comment.text
            uploads = list(uploads)
            self._check_attachment_count(len(comment.attachments) + len(uploads))
            if not new_text and not comment.attachments and not uploads:
                raise ValidationError("Comment must have either text or attachments")
            self.attachment_service.validate(uploads)

            new_attachments = await self.attachment_service.store_all(uploads)
            try:
                updated = await self.comment_repository.update(
                    comment.id,
                    CommentPatch(
                        text=new_text,
                        attachments=[*comment.attachments, *new_attachments],
                        edited_at=utcnow(),
                    ),
                    expected_version=comment.version,
                )
            except Exception as e:
                logfire.error(
                    "Comment update failed, discarding stored attachments",
                    comment_id=str(comment_id),
                    attachment_count=len(new_attachments),
                    error=str(e),
                )
                await self.attachment_service.discard(new_attachments)
                raise

            logfire.info(
                "Comment updated",
                comment_id=str(comment_id),
                text_length=len(updated.text),
                attachment_count=len(updated.attachments),
            )
            return await self._with_author(updated)

    async def delete_comment(
        self, comment_id: CommentId, requester_id: UserId | None
    ) -> Comment:
        """Soft-delete a comment.

        The record keeps its parent/root/depth links so replies remain in
        place; its text becomes the deleted placeholder and its attachments
        are cleared. Deleting an already deleted comment is rejected.

        Attachment files are deleted after the record; file deletion
        failures are logged and do not fail the operation.

        Args:
            comment_id: Comment ID
            requester_id: Authenticated user (must be the author)

        Returns:
            The deleted comment

        Raises:
            NotAuthenticatedError: If there is no authenticated requester
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
            InvalidStateError: If the comment is already deleted
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id) if requester_id else None,
        ):
            if requester_id is None:
                raise NotAuthenticatedError("delete comments")

            comment = await self._get_owned(comment_id, requester_id, "delete")

            deleted = await self.comment_repository.update(
                comment.id,
                CommentPatch(
                    is_deleted=True,
                    text=self.settings.deleted_placeholder,
                    attachments=[],
                ),
                expected_version=comment.version,
            )
            failed = await self.attachment_service.discard(comment.attachments)

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                attachment_count=len(comment.attachments),
                failed_file_deletions=len(failed),
            )
            return deleted

    async def remove_attachment(
        self,
        comment_id: CommentId,
        requester_id: UserId | None,
        attachment_id: AttachmentId,
    ) -> CommentNode:
        """Remove a single attachment from a comment.

        The content check runs before anything is changed, so a rejected
        removal leaves both the record and the file untouched.

        Args:
            comment_id: Comment ID
            requester_id: Authenticated user (must be the author)
            attachment_id: Attachment to remove

        Returns:
            Updated comment with its author profile

        Raises:
            NotAuthenticatedError: If there is no authenticated requester
            NotFoundError: If the comment or attachment does not exist
            ForbiddenError: If the requester is not the author
            InvalidStateError: If the comment is deleted
            ValidationError: If the comment would be left without content
        """
        with logfire.span(
            "comment_service.remove_attachment",
            comment_id=str(comment_id),
            attachment_id=str(attachment_id),
        ):
            if requester_id is None:
                raise NotAuthenticatedError("modify comments")

            comment = await self._get_owned(comment_id, requester_id, "modify")

            attachment = comment.find_attachment(attachment_id)
            if not attachment:
                logfire.warn(
                    "Attachment not found",
                    comment_id=str(comment_id),
                    attachment_id=str(attachment_id),
                )
                raise NotFoundError("Attachment", str(attachment_id))

            remaining = [a for a in comment.attachments if a.id != attachment_id]
            if not comment.text.strip() and not remaining:
                raise ValidationError(
                    "Cannot remove attachment. Comment must have either text "
                    "or attachments"
                )

            updated = await self.comment_repository.update(
                comment.id,
                CommentPatch(attachments=remaining, edited_at=utcnow()),
                expected_version=comment.version,
            )
            await self.attachment_service.discard([attachment])

            logfire.info(
                "Attachment removed",
                comment_id=str(comment_id),
                attachment_id=str(attachment_id),
                remaining=len(remaining),
            )
            return await self._with_author(updated)

    async def purge_orphaned_attachments(self) -> int:
        """Delete stored files that no comment references any more.

        Returns:
            Number of files deleted
        """
        with logfire.span("comment_service.purge_orphaned_attachments"):
            referenced = await self.comment_repository.find_attachment_urls()
            orphans = await self.attachment_service.find_orphans(referenced)
            failed = await self.attachment_service.discard_urls(orphans)
            purged = len(orphans) - len(failed)
            logfire.info(
                "Orphaned attachments purged",
                referenced=len(referenced),
                purged=purged,
                failed=len(failed),
            )
            return purged

    async def _get_owned(
        self, comment_id: CommentId, requester_id: UserId, action: str
    ) -> Comment:
        """Load a live comment owned by the requester."""
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))

        if comment.author_id != requester_id:
            logfire.warn(
                "Unauthorized comment modification attempt",
                comment_id=str(comment_id),
                requester_id=str(requester_id),
                action=action,
            )
            raise ForbiddenError("comment", str(comment_id), str(requester_id))

        if comment.is_deleted:
            logfire.warn(
                "Attempt to modify deleted comment",
                comment_id=str(comment_id),
                action=action,
            )
            raise InvalidStateError("comment", str(comment_id), action)

        return comment

    def _clean_text(self, text: str | None) -> str:
        body = (text or "").strip()
        if len(body) > self.settings.max_text_length:
            raise ValidationError(
                f"Comment text exceeds {self.settings.max_text_length} characters"
            )
        return body

    def _check_attachment_count(self, count: int) -> None:
        if count > self.settings.max_attachments:
            raise ValidationError(
                f"A comment can have at most {self.settings.max_attachments} "
                "attachments"
            )

    async def _authors(
        self, comments: Sequence[Comment]
    ) -> dict[UserId, UserProfile]:
        if not comments:
            return {}
        return await self.user_repository.find_profiles(
            {c.author_id for c in comments}
        )

    async def _with_author(self, comment: Comment) -> CommentNode:
        authors = await self._authors([comment])
        return CommentNode(comment=comment, author=authors.get(comment.author_id))
