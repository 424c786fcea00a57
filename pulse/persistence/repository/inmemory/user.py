"""In-memory user repository for testing."""

from typing import Optional

from pulse.domain.model import User
from pulse.domain.repository import UserRepository
from pulse.domain.value import UserId

from .base import InMemoryRepository


class InMemoryUserRepository(InMemoryRepository, UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        self._users[user.id] = user
        return user
