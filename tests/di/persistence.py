"""Mock persistence providers for testing."""

from dishka import Scope, provide

from huddle.domain.repository import (
    CommentRepository,
    EventRepository,
    UserRepository,
)
from huddle.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryEventRepository,
    InMemoryUserRepository,
)
from huddle.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so every request served by one container sees the same
    data; each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_event_repository(self) -> EventRepository:
        """Provide in-memory event repository."""
        return InMemoryEventRepository()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()
