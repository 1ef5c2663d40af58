"""Repository interfaces for Huddle domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from huddle.domain.repository.comment import CommentRepository
from huddle.domain.repository.event import EventRepository
from huddle.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "EventRepository",
    "UserRepository",
]
