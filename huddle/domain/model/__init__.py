"""Domain model entities for Huddle."""

from huddle.domain.model.comment import Attachment, Comment, CommentPatch
from huddle.domain.model.event import Event
from huddle.domain.model.user import UserProfile

__all__ = [
    "Attachment",
    "Comment",
    "CommentPatch",
    "Event",
    "UserProfile",
]
