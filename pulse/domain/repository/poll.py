"""Admin poll repository interfaces."""

from abc import ABC, abstractmethod

from pulse.domain.model.poll import Poll, PollInvite
from pulse.domain.value import InviteToken, PollId, PollStatus


class PollRepository(ABC):
    """Repository for admin Poll entity."""

    @abstractmethod
    async def find_by_id(self, poll_id: PollId) -> Poll | None:
        """Find a poll by ID.

        Args:
            poll_id: The poll's unique identifier

        Returns:
            The poll if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_status(self, status: PollStatus) -> list[Poll]:
        """Find polls in a status, newest first."""
        pass

    @abstractmethod
    async def save(self, poll: Poll) -> Poll:
        """Save a poll (create or update).

        Args:
            poll: The poll to save

        Returns:
            The saved poll
        """
        pass


class PollInviteRepository(ABC):
    """Repository for admin poll invite tokens."""

    @abstractmethod
    async def find_by_token(self, token: InviteToken) -> PollInvite | None:
        """Find an invite by token."""
        pass

    @abstractmethod
    async def save_many(self, invites: list[PollInvite]) -> list[PollInvite]:
        """Insert invites in one batch."""
        pass
