"""PostgreSQL implementation of User repository."""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from huddle.domain.model import UserProfile
from huddle.domain.repository import UserRepository
from huddle.domain.value import UserId
from huddle.persistence.errors import translate_errors
from huddle.persistence.mappers import row_to_user_profile
from huddle.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_profiles(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, UserProfile]:
        """Fetch display profiles for a set of users in one query."""
        ids = list(set(user_ids))
        if not ids:
            return {}

        stmt = select(
            users_table.c.id,
            users_table.c.username,
            users_table.c.first_name,
            users_table.c.last_name,
            users_table.c.avatar_url,
        ).where(users_table.c.id.in_(ids))

        with translate_errors("users.find_profiles"):
            result = await self.session.execute(stmt)

        profiles = [row_to_user_profile(row._asdict()) for row in result.fetchall()]
        return {profile.id: profile for profile in profiles}
