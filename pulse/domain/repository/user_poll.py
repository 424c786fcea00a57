"""User poll repository interface."""

from abc import ABC, abstractmethod

from pulse.domain.model.user_poll import UserPoll
from pulse.domain.value import UserId, UserPollId


class UserPollRepository(ABC):
    """Repository for UserPoll entity (with its ordered options)."""

    @abstractmethod
    async def find_by_id(self, poll_id: UserPollId) -> UserPoll | None:
        """Find a user poll by ID, options included."""
        pass

    @abstractmethod
    async def find_owned(
        self, poll_id: UserPollId, creator_id: UserId
    ) -> UserPoll | None:
        """Find a user poll only if it belongs to the given creator.

        Args:
            poll_id: User poll ID
            creator_id: Expected creator

        Returns:
            The poll if it exists and is owned by ``creator_id``, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, poll: UserPoll) -> UserPoll:
        """Save a user poll (create or update). Options are written on create."""
        pass
