"""In-memory user repository for testing."""

from collections.abc import Iterable

from huddle.domain.model.user import UserProfile
from huddle.domain.repository.user import UserRepository
from huddle.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, UserProfile] = {}

    async def find_profiles(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, UserProfile]:
        """Fetch profiles for the known users among user_ids."""
        return {uid: self._users[uid] for uid in set(user_ids) if uid in self._users}

    async def save(self, user: UserProfile) -> UserProfile:
        """Save or replace a user profile."""
        self._users[user.id] = user
        return user
