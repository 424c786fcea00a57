"""In-memory user poll repository for testing."""

from typing import Optional

from pulse.domain.model import UserPoll
from pulse.domain.repository import UserPollRepository
from pulse.domain.value import UserId, UserPollId

from .base import InMemoryRepository


class InMemoryUserPollRepository(InMemoryRepository, UserPollRepository):
    """In-memory implementation of UserPollRepository for testing."""

    def __init__(self) -> None:
        self._polls: dict[UserPollId, UserPoll] = {}

    async def find_by_id(self, poll_id: UserPollId) -> Optional[UserPoll]:
        """Find a user poll by ID."""
        return self._polls.get(poll_id)

    async def find_owned(
        self, poll_id: UserPollId, creator_id: UserId
    ) -> Optional[UserPoll]:
        """Find a user poll only if it belongs to the given creator."""
        poll = self._polls.get(poll_id)
        if poll is None or poll.creator_id != creator_id:
            return None
        return poll

    async def save(self, poll: UserPoll) -> UserPoll:
        """Save a user poll (create or update)."""
        self._polls[poll.id] = poll
        return poll
