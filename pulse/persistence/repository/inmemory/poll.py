"""In-memory admin poll repositories for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from pulse.domain.model import Poll, PollInvite
from pulse.domain.repository import PollInviteRepository, PollRepository
from pulse.domain.value import InviteToken, PollId, PollStatus

from .base import InMemoryRepository


class InMemoryPollRepository(InMemoryRepository, PollRepository):
    """In-memory implementation of PollRepository for testing."""

    def __init__(self) -> None:
        self._polls: dict[PollId, Poll] = {}

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll by ID."""
        return self._polls.get(poll_id)

    async def find_by_status(self, status: PollStatus) -> list[Poll]:
        """Find polls in a status, newest first."""
        matches = [poll for poll in self._polls.values() if poll.status == status]
        matches.sort(key=lambda poll: poll.created_at, reverse=True)
        return matches

    async def save(self, poll: Poll) -> Poll:
        """Save a poll (create or update)."""
        self._polls[poll.id] = poll
        return poll


class InMemoryPollInviteRepository(InMemoryRepository, PollInviteRepository):
    """In-memory implementation of PollInviteRepository for testing."""

    def __init__(self) -> None:
        self._invites: dict[str, PollInvite] = {}

    async def find_by_token(self, token: InviteToken) -> Optional[PollInvite]:
        """Find an invite by token."""
        return self._invites.get(token.root)

    async def save_many(self, invites: list[PollInvite]) -> list[PollInvite]:
        """Insert invites in one batch.

        Raises:
            IntegrityError: If any token is already taken
        """
        tokens = [invite.token.root for invite in invites]
        if len(set(tokens)) != len(tokens) or any(t in self._invites for t in tokens):
            raise IntegrityError("Duplicate poll invite token", None, Exception())

        for invite in invites:
            self._invites[invite.token.root] = invite
        return invites
