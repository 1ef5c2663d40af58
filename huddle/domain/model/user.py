"""User profile projection.

Accounts, passwords and email verification live in the accounts module.
Comments only display a small public slice of the user record.
"""

from typing import Optional

from huddle.domain.model.common import DomainModel
from huddle.domain.value import UserId


class UserProfile(DomainModel):
    """Public author information shown next to a comment."""

    id: UserId
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar_url: Optional[str] = None
