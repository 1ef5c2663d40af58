"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from huddle.domain.model import Attachment, Comment, Event, UserProfile
from huddle.domain.value import CommentId, EventId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        event_id=EventId(_uuid(row["event_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        root_id=CommentId(_uuid(row["root_id"])) if row.get("root_id") else None,
        depth=row["depth"],
        attachments=[
            Attachment.model_validate(item) for item in row.get("attachments") or []
        ],
        is_deleted=row["is_deleted"],
        version=row["version"],
        created_at=row["created_at"],
        edited_at=row.get("edited_at"),
    )


def attachments_to_json(attachments: list[Attachment]) -> list[Dict[str, Any]]:
    """Convert attachments to the JSONB column representation."""
    return [attachment.model_dump(mode="json") for attachment in attachments]


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    comment_dict = comment.model_dump()
    comment_dict["attachments"] = attachments_to_json(comment.attachments)
    return comment_dict


def row_to_event(row: Dict[str, Any]) -> Event:
    """Convert database row to Event domain model."""
    return Event(
        id=EventId(_uuid(row["id"])),
        title=row["title"],
        starts_at=row.get("starts_at"),
        created_at=row["created_at"],
    )


def row_to_user_profile(row: Dict[str, Any]) -> UserProfile:
    """Convert database row to UserProfile projection."""
    return UserProfile(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        avatar_url=row.get("avatar_url"),
    )
