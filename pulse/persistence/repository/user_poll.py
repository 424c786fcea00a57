"""PostgreSQL implementation of UserPoll repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pulse.domain.model import UserPoll
from pulse.domain.repository import UserPollRepository
from pulse.domain.value import UserId, UserPollId
from pulse.persistence.mappers import (
    row_to_user_poll,
    user_poll_options_to_dicts,
    user_poll_to_dict,
)
from pulse.persistence.tables import user_poll_options_table, user_polls_table


class PostgresUserPollRepository(UserPollRepository):
    """PostgreSQL implementation of UserPollRepository.

    Options live in their own table and are loaded with a second query.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, poll_id: UserPollId) -> Optional[UserPoll]:
        """Find a user poll by ID, with its options."""
        stmt = select(user_polls_table).where(user_polls_table.c.id == poll_id)
        return await self._find_one(stmt)

    async def find_owned(
        self, poll_id: UserPollId, creator_id: UserId
    ) -> Optional[UserPoll]:
        """Find a user poll only if it belongs to the given creator."""
        stmt = select(user_polls_table).where(
            user_polls_table.c.id == poll_id,
            user_polls_table.c.creator_id == creator_id,
        )
        return await self._find_one(stmt)

    async def save(self, poll: UserPoll) -> UserPoll:
        """Save a user poll (create or update). Options are written on create."""
        poll_dict = user_poll_to_dict(poll)

        exists = await self.session.execute(
            select(user_polls_table.c.id).where(user_polls_table.c.id == poll.id)
        )
        if exists.first() is not None:
            await self.session.execute(
                update(user_polls_table)
                .where(user_polls_table.c.id == poll.id)
                .values(**poll_dict)
            )
        else:
            await self.session.execute(insert(user_polls_table).values(**poll_dict))
            option_dicts = user_poll_options_to_dicts(poll)
            if option_dicts:
                await self.session.execute(
                    insert(user_poll_options_table).values(option_dicts)
                )

        await self.session.flush()
        return poll

    async def _find_one(self, stmt) -> Optional[UserPoll]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        options = await self.session.execute(
            select(user_poll_options_table).where(
                user_poll_options_table.c.poll_id == row["id"]
            )
        )
        return row_to_user_poll(
            dict(row), [dict(option) for option in options.mappings().all()]
        )
