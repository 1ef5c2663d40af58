"""Comment entity.

Comments are threaded discussions on events with a bounded depth.
The tree is stored flat: every reply carries its direct parent and a
denormalized pointer to the top-level comment of its thread, so a whole
thread can be fetched with a single query and rebuilt in memory.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import Field

from huddle.domain.error import ValidationError
from huddle.domain.model.common import DomainModel
from huddle.domain.value import (
    AttachmentId,
    AttachmentType,
    CommentId,
    EventId,
    StoredFile,
    UserId,
)

# Deepest nesting level a comment may live at (root comments are depth 0)
MAX_THREAD_DEPTH = 3
MAX_TEXT_LENGTH = 1000


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Attachment(DomainModel):
    """File attached to a comment.

    Each attachment has its own id so it can be removed individually.
    """

    id: AttachmentId
    type: AttachmentType
    url: str
    filename: str
    size: int = Field(ge=0)
    mimetype: str

    @classmethod
    def from_stored(cls, stored: StoredFile) -> "Attachment":
        """Build an attachment descriptor for a freshly stored file."""
        return cls(
            id=AttachmentId(uuid4()),
            type=AttachmentType.from_mimetype(stored.mimetype),
            url=stored.url,
            filename=stored.filename,
            size=stored.size,
            mimetype=stored.mimetype,
        )


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on an event or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - root_id: Top-level ancestor of the thread (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)

    Deletion is soft: the record stays in place so replies remain
    addressable, only its content is replaced.
    """

    id: CommentId
    event_id: EventId
    author_id: UserId
    text: str = Field(default="", max_length=MAX_TEXT_LENGTH)
    parent_id: Optional[CommentId] = None
    root_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0, le=MAX_THREAD_DEPTH)
    attachments: list[Attachment] = Field(default_factory=list)
    is_deleted: bool = False
    version: int = Field(default=1, ge=1)  # Bumped on every update
    created_at: datetime = Field(default_factory=utcnow)
    edited_at: Optional[datetime] = None

    @property
    def thread_root_id(self) -> CommentId:
        """Id of the top-level comment of this comment's thread."""
        return self.root_id or self.id

    @property
    def has_content(self) -> bool:
        """Whether the comment carries text or at least one attachment."""
        return bool(self.text.strip()) or bool(self.attachments)

    def find_attachment(self, attachment_id: AttachmentId) -> Attachment | None:
        """Look up an attachment by id."""
        return next((a for a in self.attachments if a.id == attachment_id), None)

    def check_invariants(self) -> None:
        """Verify the structural invariants of a comment record.

        Raises:
            ValidationError: If the record is inconsistent
        """
        if self.depth == 0:
            if self.parent_id is not None or self.root_id is not None:
                raise ValidationError(
                    "Top-level comments cannot have a parent or thread root"
                )
        else:
            if self.parent_id is None or self.root_id is None:
                raise ValidationError("Replies must reference a parent and a root")
            if self.parent_id == self.id or self.root_id == self.id:
                raise ValidationError("A comment cannot reply to itself")
        if self.text != self.text.strip():
            raise ValidationError("Comment text must be trimmed")
        if not self.is_deleted and not self.has_content:
            raise ValidationError("Comment must have either text or attachments")


class CommentPatch(DomainModel):
    """Partial update applied by the repository.

    Fields left as None are not touched.
    """

    text: Optional[str] = None
    attachments: Optional[list[Attachment]] = None
    edited_at: Optional[datetime] = None
    is_deleted: Optional[bool] = None

    def apply(self, comment: Comment) -> Comment:
        """Return a copy of the comment with this patch applied."""
        changes = self.model_dump(exclude_none=True)
        if self.attachments is not None:
            changes["attachments"] = list(self.attachments)
        changes["version"] = comment.version + 1
        return comment.model_copy(update=changes)
