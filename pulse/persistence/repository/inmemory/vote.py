"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from pulse.domain.model import Vote
from pulse.domain.repository import VoteRepository
from pulse.domain.value import PollId, PollInviteId, UserId

from .base import InMemoryRepository


class InMemoryVoteRepository(InMemoryRepository, VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_poll_and_user(
        self, poll_id: PollId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a poll."""
        for vote in self._votes:
            if vote.poll_id == poll_id and vote.user_id == user_id:
                return vote
        return None

    async def find_by_poll_and_invite(
        self, poll_id: PollId, invite_id: PollInviteId
    ) -> Optional[Vote]:
        """Find the vote cast with an invite on a poll."""
        for vote in self._votes:
            if vote.poll_id == poll_id and vote.invite_id == invite_id:
                return vote
        return None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            IntegrityError: On a duplicate (poll, user) or (poll, invite)
        """
        for existing in self._votes:
            if existing.poll_id != vote.poll_id:
                continue
            if vote.user_id is not None and existing.user_id == vote.user_id:
                raise IntegrityError("Duplicate vote per user", None, Exception())
            if vote.invite_id is not None and existing.invite_id == vote.invite_id:
                raise IntegrityError("Duplicate vote per invite", None, Exception())

        self._votes.append(vote)
        return vote

    async def count_by_poll(self, poll_id: PollId) -> int:
        """Count the votes on a poll."""
        return sum(1 for vote in self._votes if vote.poll_id == poll_id)
