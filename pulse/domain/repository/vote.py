"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pulse.domain.model.vote import Vote
from pulse.domain.value import PollId, PollInviteId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_poll_and_user(
        self, poll_id: PollId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a poll.

        Args:
            poll_id: The poll's ID
            user_id: The user's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_poll_and_invite(
        self, poll_id: PollId, invite_id: PollInviteId
    ) -> Optional[Vote]:
        """Find the vote cast with an invite on a poll.

        Args:
            poll_id: The poll's ID
            invite_id: The invite's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        This raises if a vote already exists for this poll/user or
        poll/invite combination (unique constraint violation).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        pass

    @abstractmethod
    async def count_by_poll(self, poll_id: PollId) -> int:
        """Count votes on a poll."""
        pass
