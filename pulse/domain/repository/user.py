"""User repository interface."""

from abc import ABC, abstractmethod

from pulse.domain.model.user import User
from pulse.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity (read-mostly; users are owned by the auth service)."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
