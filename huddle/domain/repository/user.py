"""User repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from huddle.domain.model.user import UserProfile
from huddle.domain.value import UserId


class UserRepository(ABC):
    """Read-only access to public user profiles."""

    @abstractmethod
    async def find_profiles(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, UserProfile]:
        """Fetch display profiles for a set of users.

        Unknown ids are simply absent from the result.

        Args:
            user_ids: Users to look up

        Returns:
            Mapping of user ID to profile
        """
        pass
