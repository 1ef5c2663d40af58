"""Response items shared by the comment use cases."""

from datetime import datetime
from typing import Callable, TypeVar
from uuid import UUID

from pydantic import BaseModel, Field

from huddle.domain.error import ValidationError
from huddle.domain.model import Attachment, UserProfile
from huddle.domain.service import CommentNode
from huddle.domain.value import AttachmentType

IdT = TypeVar("IdT")


def parse_id(value: str, kind: Callable[[UUID], IdT], name: str) -> IdT:
    """Parse a UUID string into a typed identifier.

    Raises:
        ValidationError: If the value is not a valid UUID
    """
    try:
        return kind(UUID(value))
    except (ValueError, TypeError) as e:
        raise ValidationError(f"Invalid {name}: {value}") from e


class AttachmentItem(BaseModel):
    """Attachment in response."""

    attachment_id: str
    type: AttachmentType
    url: str
    filename: str
    size: int
    mimetype: str

    @classmethod
    def from_attachment(cls, attachment: Attachment) -> "AttachmentItem":
        return cls(
            attachment_id=str(attachment.id),
            type=attachment.type,
            url=attachment.url,
            filename=attachment.filename,
            size=attachment.size,
            mimetype=attachment.mimetype,
        )


class AuthorItem(BaseModel):
    """Comment author in response."""

    user_id: str
    username: str
    first_name: str | None
    last_name: str | None
    avatar_url: str | None

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "AuthorItem":
        return cls(
            user_id=str(profile.id),
            username=profile.username,
            first_name=profile.first_name,
            last_name=profile.last_name,
            avatar_url=profile.avatar_url,
        )


class CommentItem(BaseModel):
    """Comment in response, with nested replies."""

    comment_id: str
    event_id: str
    author_id: str
    author: AuthorItem | None
    text: str
    parent_id: str | None
    root_id: str | None
    depth: int
    attachments: list[AttachmentItem]
    is_deleted: bool
    is_edited: bool
    version: int
    created_at: datetime
    edited_at: datetime | None
    replies: list["CommentItem"] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: CommentNode):
        """Convert a comment node and its replies."""
        comment = node.comment
        return cls(
            comment_id=str(comment.id),
            event_id=str(comment.event_id),
            author_id=str(comment.author_id),
            author=AuthorItem.from_profile(node.author) if node.author else None,
            text=comment.text,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            root_id=str(comment.root_id) if comment.root_id else None,
            depth=comment.depth,
            attachments=[
                AttachmentItem.from_attachment(a) for a in comment.attachments
            ],
            is_deleted=comment.is_deleted,
            is_edited=comment.edited_at is not None,
            version=comment.version,
            created_at=comment.created_at,
            edited_at=comment.edited_at,
            replies=[CommentItem.from_node(reply) for reply in node.replies],
        )
