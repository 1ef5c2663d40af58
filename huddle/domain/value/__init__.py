"""Domain value objects for Huddle."""

from huddle.domain.value.identifiers import (
    AttachmentId,
    CommentId,
    EventId,
    UserId,
)
from huddle.domain.value.types import (
    AttachmentType,
    StoredFile,
    StoredObject,
    UploadedFile,
)

__all__ = [
    # Identifiers
    "UserId",
    "EventId",
    "CommentId",
    "AttachmentId",
    # Types
    "AttachmentType",
    "UploadedFile",
    "StoredFile",
    "StoredObject",
]
