"""In-memory user poll invite and invite group repositories for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from pulse.domain.model import InviteGroup, UserPollInvite
from pulse.domain.repository import InviteGroupRepository, UserPollInviteRepository
from pulse.domain.value import (
    InviteGroupId,
    InviteStatus,
    InviteToken,
    UserId,
    UserPollId,
)

from .base import InMemoryRepository


class InMemoryUserPollInviteRepository(InMemoryRepository, UserPollInviteRepository):
    """In-memory implementation of UserPollInviteRepository for testing.

    Emulates the unique token and the partial unique index on live
    (poll, mobile) pairs.
    """

    def __init__(self) -> None:
        self._invites: list[UserPollInvite] = []

    async def find_by_token(self, token: InviteToken) -> Optional[UserPollInvite]:
        """Find an invite by its token."""
        for invite in self._invites:
            if invite.token == token:
                return invite
        return None

    async def find_by_token_for_update(
        self, token: InviteToken
    ) -> Optional[UserPollInvite]:
        """Find an invite by token. Locking is done by the transaction manager."""
        return await self.find_by_token(token)

    async def find_live_by_mobiles(
        self, poll_id: UserPollId, mobiles: Sequence[str]
    ) -> list[UserPollInvite]:
        """Find the non-rejected invites of a poll for the given mobiles."""
        wanted = set(mobiles)
        return [
            invite
            for invite in self._invites
            if invite.poll_id == poll_id
            and invite.mobile in wanted
            and invite.status != InviteStatus.REJECTED
        ]

    async def save(self, invite: UserPollInvite) -> UserPollInvite:
        """Save an invite (create or update).

        Raises:
            IntegrityError: If a live invite already exists for (poll, mobile)
        """
        if self._conflicts(invite):
            raise IntegrityError("Duplicate live invite", None, Exception())

        for i, existing in enumerate(self._invites):
            if existing.id == invite.id:
                self._invites[i] = invite
                return invite

        self._invites.append(invite)
        return invite

    async def save_many_skip_duplicates(self, invites: list[UserPollInvite]) -> int:
        """Insert invites, silently skipping those that violate uniqueness."""
        inserted = 0
        for invite in invites:
            if self._conflicts(invite):
                continue
            self._invites.append(invite)
            inserted += 1
        return inserted

    def _conflicts(self, invite: UserPollInvite) -> bool:
        for existing in self._invites:
            if existing.id == invite.id:
                continue
            if existing.token == invite.token:
                return True
            if (
                invite.status != InviteStatus.REJECTED
                and existing.status != InviteStatus.REJECTED
                and existing.poll_id == invite.poll_id
                and existing.mobile == invite.mobile
            ):
                return True
        return False


class InMemoryInviteGroupRepository(InMemoryRepository, InviteGroupRepository):
    """In-memory implementation of InviteGroupRepository for testing."""

    def __init__(self) -> None:
        self._groups: dict[InviteGroupId, InviteGroup] = {}

    async def find_by_id(self, group_id: InviteGroupId) -> Optional[InviteGroup]:
        """Find a group by ID."""
        return self._groups.get(group_id)

    async def find_owned(
        self, owner_id: UserId, group_ids: Sequence[InviteGroupId]
    ) -> list[InviteGroup]:
        """Find the given groups owned by ``owner_id``."""
        return [
            self._groups[group_id]
            for group_id in group_ids
            if group_id in self._groups and self._groups[group_id].owner_id == owner_id
        ]

    async def find_by_owner(self, owner_id: UserId) -> list[InviteGroup]:
        """List a user's groups, newest first."""
        groups = [g for g in self._groups.values() if g.owner_id == owner_id]
        groups.sort(key=lambda group: group.created_at, reverse=True)
        return groups

    async def save(self, group: InviteGroup) -> InviteGroup:
        """Save a group (create or update)."""
        self._groups[group.id] = group
        return group
