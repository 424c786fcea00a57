"""User poll invite repository interfaces."""

from abc import ABC, abstractmethod
from typing import Sequence

from pulse.domain.model.invite import InviteGroup, UserPollInvite
from pulse.domain.value import InviteGroupId, InviteToken, UserId, UserPollId


class UserPollInviteRepository(ABC):
    """Repository for UserPollInvite entity.

    Storage carries a partial unique constraint: one non-rejected invite per
    (poll, mobile). Tokens are globally unique.
    """

    @abstractmethod
    async def find_by_token(self, token: InviteToken) -> UserPollInvite | None:
        """Find an invite by token.

        Args:
            token: The invite token

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token_for_update(
        self, token: InviteToken
    ) -> UserPollInvite | None:
        """Find an invite by token and lock its row for the current transaction."""
        pass

    @abstractmethod
    async def find_live_by_mobiles(
        self, poll_id: UserPollId, mobiles: Sequence[str]
    ) -> list[UserPollInvite]:
        """Find the non-rejected invites of a poll for the given mobiles.

        Args:
            poll_id: User poll ID
            mobiles: Normalised mobiles (or ``user:<id>`` identities)

        Returns:
            At most one invite per mobile
        """
        pass

    @abstractmethod
    async def save(self, invite: UserPollInvite) -> UserPollInvite:
        """Save an invite (create or update).

        Raises:
            IntegrityError: If a live invite already exists for (poll, mobile)
        """
        pass

    @abstractmethod
    async def save_many_skip_duplicates(self, invites: list[UserPollInvite]) -> int:
        """Insert invites, silently skipping those that violate uniqueness.

        Returns:
            Number of rows actually inserted
        """
        pass


class InviteGroupRepository(ABC):
    """Repository for a user's reusable invite groups."""

    @abstractmethod
    async def find_by_id(self, group_id: InviteGroupId) -> InviteGroup | None:
        """Find a group by ID."""
        pass

    @abstractmethod
    async def find_owned(
        self, owner_id: UserId, group_ids: Sequence[InviteGroupId]
    ) -> list[InviteGroup]:
        """Find the given groups, dropping those not owned by ``owner_id``."""
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> list[InviteGroup]:
        """List a user's groups, newest first."""
        pass

    @abstractmethod
    async def save(self, group: InviteGroup) -> InviteGroup:
        """Save a group and replace its members."""
        pass
