"""PostgreSQL implementation of user poll invite and invite group repositories."""

from typing import Optional, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from pulse.domain.model import InviteGroup, UserPollInvite
from pulse.domain.repository import InviteGroupRepository, UserPollInviteRepository
from pulse.domain.value import (
    InviteGroupId,
    InviteStatus,
    InviteToken,
    UserId,
    UserPollId,
)
from pulse.persistence.mappers import (
    invite_group_to_dict,
    row_to_invite_group,
    row_to_user_poll_invite,
    user_poll_invite_to_dict,
)
from pulse.persistence.tables import invite_groups_table, user_poll_invites_table


class PostgresUserPollInviteRepository(UserPollInviteRepository):
    """PostgreSQL implementation of UserPollInviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_token(self, token: InviteToken) -> Optional[UserPollInvite]:
        """Find an invite by its token."""
        stmt = select(user_poll_invites_table).where(
            user_poll_invites_table.c.token == token.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user_poll_invite(dict(row)) if row else None

    async def find_by_token_for_update(
        self, token: InviteToken
    ) -> Optional[UserPollInvite]:
        """Find an invite by token and lock its row (SELECT ... FOR UPDATE)."""
        stmt = (
            select(user_poll_invites_table)
            .where(user_poll_invites_table.c.token == token.root)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user_poll_invite(dict(row)) if row else None

    async def find_live_by_mobiles(
        self, poll_id: UserPollId, mobiles: Sequence[str]
    ) -> list[UserPollInvite]:
        """Find the non-rejected invites of a poll for the given mobiles."""
        if not mobiles:
            return []
        stmt = select(user_poll_invites_table).where(
            user_poll_invites_table.c.poll_id == poll_id,
            user_poll_invites_table.c.mobile.in_(list(mobiles)),
            user_poll_invites_table.c.status != InviteStatus.REJECTED.value,
        )
        result = await self.session.execute(stmt)
        return [row_to_user_poll_invite(dict(row)) for row in result.mappings().all()]

    async def save(self, invite: UserPollInvite) -> UserPollInvite:
        """Save an invite (create or update).

        Raises:
            IntegrityError: If a live invite already exists for (poll, mobile)
        """
        invite_dict = user_poll_invite_to_dict(invite)

        exists = await self.session.execute(
            select(user_poll_invites_table.c.id).where(
                user_poll_invites_table.c.id == invite.id
            )
        )
        if exists.first() is not None:
            stmt = (
                update(user_poll_invites_table)
                .where(user_poll_invites_table.c.id == invite.id)
                .values(**invite_dict)
            )
        else:
            stmt = insert(user_poll_invites_table).values(**invite_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return invite

    async def save_many_skip_duplicates(self, invites: list[UserPollInvite]) -> int:
        """Insert invites with ON CONFLICT DO NOTHING.

        Returns:
            Number of rows actually inserted
        """
        if not invites:
            return 0
        stmt = (
            pg_insert(user_poll_invites_table)
            .values([user_poll_invite_to_dict(invite) for invite in invites])
            .on_conflict_do_nothing()
            .returning(user_poll_invites_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = len(result.fetchall())
        await self.session.flush()
        return inserted


class PostgresInviteGroupRepository(InviteGroupRepository):
    """PostgreSQL implementation of InviteGroupRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, group_id: InviteGroupId) -> Optional[InviteGroup]:
        """Find a group by ID."""
        stmt = select(invite_groups_table).where(invite_groups_table.c.id == group_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite_group(dict(row)) if row else None

    async def find_owned(
        self, owner_id: UserId, group_ids: Sequence[InviteGroupId]
    ) -> list[InviteGroup]:
        """Find the given groups owned by ``owner_id``."""
        if not group_ids:
            return []
        stmt = select(invite_groups_table).where(
            invite_groups_table.c.owner_id == owner_id,
            invite_groups_table.c.id.in_(list(group_ids)),
        )
        result = await self.session.execute(stmt)
        return [row_to_invite_group(dict(row)) for row in result.mappings().all()]

    async def find_by_owner(self, owner_id: UserId) -> list[InviteGroup]:
        """List a user's groups, newest first."""
        stmt = (
            select(invite_groups_table)
            .where(invite_groups_table.c.owner_id == owner_id)
            .order_by(invite_groups_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invite_group(dict(row)) for row in result.mappings().all()]

    async def save(self, group: InviteGroup) -> InviteGroup:
        """Save a group (create or update)."""
        group_dict = invite_group_to_dict(group)

        existing = await self.find_by_id(group.id)
        if existing:
            stmt = (
                update(invite_groups_table)
                .where(invite_groups_table.c.id == group.id)
                .values(**group_dict)
            )
        else:
            stmt = insert(invite_groups_table).values(**group_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return group
