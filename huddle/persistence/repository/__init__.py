"""PostgreSQL repository implementations."""

from huddle.persistence.repository.comment import PostgresCommentRepository
from huddle.persistence.repository.event import PostgresEventRepository
from huddle.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresEventRepository",
    "PostgresUserRepository",
]
