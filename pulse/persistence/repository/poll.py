"""PostgreSQL implementation of admin Poll repositories."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pulse.domain.model import Poll, PollInvite
from pulse.domain.repository import PollInviteRepository, PollRepository
from pulse.domain.value import InviteToken, PollId, PollStatus
from pulse.persistence.mappers import (
    poll_invite_to_dict,
    poll_to_dict,
    row_to_poll,
    row_to_poll_invite,
)
from pulse.persistence.tables import poll_invites_table, polls_table


class PostgresPollRepository(PollRepository):
    """PostgreSQL implementation of PollRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, poll_id: PollId) -> Optional[Poll]:
        """Find a poll by ID."""
        stmt = select(polls_table).where(polls_table.c.id == poll_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_poll(dict(row)) if row else None

    async def find_by_status(self, status: PollStatus) -> list[Poll]:
        """Find polls in a status, newest first."""
        stmt = (
            select(polls_table)
            .where(polls_table.c.status == status.value)
            .order_by(polls_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_poll(dict(row)) for row in result.mappings().all()]

    async def save(self, poll: Poll) -> Poll:
        """Save a poll (create or update)."""
        poll_dict = poll_to_dict(poll)

        existing = await self.find_by_id(poll.id)
        if existing:
            stmt = (
                update(polls_table)
                .where(polls_table.c.id == poll.id)
                .values(**poll_dict)
            )
        else:
            stmt = insert(polls_table).values(**poll_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return poll


class PostgresPollInviteRepository(PollInviteRepository):
    """PostgreSQL implementation of PollInviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_token(self, token: InviteToken) -> Optional[PollInvite]:
        """Find an invite by token."""
        stmt = select(poll_invites_table).where(
            poll_invites_table.c.token == token.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_poll_invite(dict(row)) if row else None

    async def save_many(self, invites: list[PollInvite]) -> list[PollInvite]:
        """Insert invites in one batch."""
        if not invites:
            return []
        stmt = insert(poll_invites_table).values(
            [poll_invite_to_dict(invite) for invite in invites]
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return invites
