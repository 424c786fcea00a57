"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from pulse.domain.model import Vote
from pulse.domain.repository import VoteRepository
from pulse.domain.value import PollId, PollInviteId, UserId
from pulse.persistence.mappers import row_to_vote, vote_to_dict
from pulse.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_poll_and_user(
        self, poll_id: PollId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a poll."""
        stmt = select(votes_table).where(
            votes_table.c.poll_id == poll_id, votes_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_poll_and_invite(
        self, poll_id: PollId, invite_id: PollInviteId
    ) -> Optional[Vote]:
        """Find the vote cast with an invite on a poll."""
        stmt = select(votes_table).where(
            votes_table.c.poll_id == poll_id, votes_table.c.invite_id == invite_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            IntegrityError: On a duplicate (poll, user) or (poll, invite)
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def count_by_poll(self, poll_id: PollId) -> int:
        """Count the votes on a poll."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.poll_id == poll_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
