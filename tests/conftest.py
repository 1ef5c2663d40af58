"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from huddle.domain.model import Comment, Event, UserProfile
from huddle.domain.value import CommentId, EventId, UploadedFile, UserId

# Smallest valid PNG, 1x1 transparent pixel
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


def make_event(title: str = "Community meetup") -> Event:
    """Build an event for tests."""
    return Event(
        id=EventId(uuid4()),
        title=title,
        created_at=datetime.now(timezone.utc),
    )


def make_user(username: str = "alice") -> UserProfile:
    """Build a user profile for tests."""
    return UserProfile(
        id=UserId(uuid4()),
        username=username,
        first_name=username.capitalize(),
    )


def make_upload(
    filename: str = "photo.png", mimetype: str = "image/png"
) -> UploadedFile:
    """Build an uploaded image for tests."""
    return UploadedFile(filename=filename, mimetype=mimetype, data=PNG_BYTES)


def make_comment(
    event_id: EventId,
    author_id: UserId,
    text: str = "A comment",
    parent: Comment | None = None,
    minutes_ago: int = 0,
    **overrides,
) -> Comment:
    """Build a comment, deriving thread position from the parent."""
    fields = dict(
        id=CommentId(uuid4()),
        event_id=event_id,
        author_id=author_id,
        text=text,
        parent_id=parent.id if parent else None,
        root_id=parent.thread_root_id if parent else None,
        depth=parent.depth + 1 if parent else 0,
        created_at=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
    )
    fields.update(overrides)
    return Comment(**fields)
