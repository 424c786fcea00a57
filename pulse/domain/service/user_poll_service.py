"""User poll lifecycle domain service."""

import secrets
from datetime import datetime
from typing import Annotated
from uuid import uuid4

import logfire
from pydantic import AwareDatetime, BaseModel, Field
from sqlalchemy.exc import IntegrityError

from pulse.domain.error import DomainError, ErrorCode
from pulse.domain.model.invite import InviteGroup, UserPollInvite
from pulse.domain.model.user_poll import UserPoll, UserPollOption
from pulse.domain.repository import (
    InviteGroupRepository,
    TransactionManager,
    UserPollInviteRepository,
    UserPollRepository,
)
from pulse.domain.value import (
    CategoryId,
    InviteGroupId,
    InviteStatus,
    InviteToken,
    StartMode,
    UserId,
    UserPollId,
    UserPollInviteId,
    UserPollOptionId,
    UserPollStatus,
    UserPollType,
)
from pulse.domain.value.types import normalize_mobile, user_identity

from .base import Service
from .category_gate import CategoryGate
from .clock import Clock

OptionLabel = Annotated[str, Field(min_length=1)]


class UserPollDraft(BaseModel):
    """Fields of a new user poll."""

    category_id: CategoryId
    type: UserPollType
    title: str = Field(min_length=1)
    description: str | None = None
    source_info: str | None = None
    options: list[OptionLabel] = Field(min_length=1)
    start_mode: StartMode
    start_at: AwareDatetime | None = None
    end_at: AwareDatetime | None = None
    is_invite_only: bool = True


class NewInviteGroup(BaseModel):
    """Group created inline while inviting."""

    name: str = Field(min_length=1)
    mobiles: list[str] = Field(default_factory=list)


class InviteTargets(BaseModel):
    """Sources of mobiles for a bulk invite."""

    mobiles: list[str] = Field(default_factory=list)
    existing_group_ids: list[InviteGroupId] = Field(default_factory=list)
    new_group: NewInviteGroup | None = None


def new_invite_token() -> InviteToken:
    return InviteToken(secrets.token_urlsafe(24))


class UserPollService(Service):
    """Domain service for user-created polls and their invites.

    Polls start LIVE (instant) or SCHEDULED (future start) and end either
    explicitly or once ``end_at`` passes, as observed by readers.
    """

    def __init__(
        self,
        user_poll_repository: UserPollRepository,
        user_poll_invite_repository: UserPollInviteRepository,
        invite_group_repository: InviteGroupRepository,
        category_gate: CategoryGate,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        """Initialize user poll service.

        Args:
            user_poll_repository: User poll repository
            user_poll_invite_repository: User poll invite repository
            invite_group_repository: Invite group repository
            category_gate: Category precondition checks
            transaction_manager: Transaction boundary
            clock: Time source
        """
        self.user_poll_repository = user_poll_repository
        self.user_poll_invite_repository = user_poll_invite_repository
        self.invite_group_repository = invite_group_repository
        self.category_gate = category_gate
        self.transaction_manager = transaction_manager
        self.clock = clock

    async def get_poll(self, poll_id: UserPollId) -> UserPoll:
        """Get a user poll or raise POLL_NOT_FOUND."""
        poll = await self.user_poll_repository.find_by_id(poll_id)
        if poll is None:
            raise DomainError.from_code(ErrorCode.POLL_NOT_FOUND)
        return poll

    async def create(self, creator_id: UserId, draft: UserPollDraft) -> UserPoll:
        """Create a user poll directly into LIVE or SCHEDULED.

        Args:
            creator_id: Creating user
            draft: Poll fields

        Returns:
            Created poll with options in submission order

        Raises:
            NotFoundError: CATEGORY_NOT_FOUND
            BusinessRuleViolationError: CATEGORY_NOT_CHILD, CATEGORY_NOT_ACTIVE,
                CATEGORY_NOT_ALLOWED
            ValidationError: INVALID_START_AT, END_AT_BEFORE_START
        """
        with logfire.span(
            "user_poll_service.create",
            creator_id=str(creator_id),
            category_id=str(draft.category_id),
            start_mode=draft.start_mode.value,
        ):
            await self.category_gate.ensure_allowed(draft.category_id)

            now = self.clock.now()
            if draft.start_mode == StartMode.INSTANT:
                status = UserPollStatus.LIVE
                start_at = now
            else:
                if draft.start_at is None or draft.start_at <= now:
                    logfire.warn(
                        "Scheduled start not in the future", creator_id=str(creator_id)
                    )
                    raise DomainError.from_code(ErrorCode.INVALID_START_AT)
                status = UserPollStatus.SCHEDULED
                start_at = draft.start_at

            if draft.end_at is not None and draft.end_at <= start_at:
                raise DomainError.from_code(ErrorCode.END_AT_BEFORE_START)

            poll = UserPoll(
                id=UserPollId(uuid4()),
                creator_id=creator_id,
                category_id=draft.category_id,
                title=draft.title,
                description=draft.description,
                source_info=draft.source_info,
                type=draft.type,
                status=status,
                is_invite_only=draft.is_invite_only,
                start_at=start_at,
                end_at=draft.end_at,
                options=[
                    UserPollOption(
                        id=UserPollOptionId(uuid4()), label=label, display_order=index
                    )
                    for index, label in enumerate(draft.options)
                ],
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_poll_repository.save(poll)
            logfire.info(
                "User poll created", poll_id=str(saved.id), status=saved.status.value
            )
            return saved

    async def end(self, user_id: UserId, poll_id: UserPollId) -> UserPoll:
        """End a poll owned by the caller.

        Allowed from LIVE or SCHEDULED, and idempotently from CLOSED. An
        existing ``end_at`` is kept, otherwise it is stamped to now.

        Raises:
            BusinessRuleViolationError: NOT_FOUND_OR_FORBIDDEN
        """
        with logfire.span(
            "user_poll_service.end", user_id=str(user_id), poll_id=str(poll_id)
        ):
            poll = await self.user_poll_repository.find_owned(poll_id, user_id)
            if poll is None or poll.status == UserPollStatus.DRAFT:
                logfire.warn(
                    "End rejected", user_id=str(user_id), poll_id=str(poll_id)
                )
                raise DomainError.from_code(ErrorCode.NOT_FOUND_OR_FORBIDDEN)

            if poll.status == UserPollStatus.CLOSED:
                return poll

            now = self.clock.now()
            saved = await self.user_poll_repository.save(
                poll.model_copy(
                    update={
                        "status": UserPollStatus.CLOSED,
                        "end_at": poll.end_at or now,
                        "updated_at": now,
                    }
                )
            )
            logfire.info("User poll ended", poll_id=str(poll_id))
            return saved

    async def extend(
        self, user_id: UserId, poll_id: UserPollId, end_at: datetime
    ) -> UserPoll:
        """Move the end of a poll owned by the caller. Status is unchanged.

        Args:
            user_id: Caller, must own the poll
            poll_id: User poll ID
            end_at: New end time

        Returns:
            Updated poll

        Raises:
            BusinessRuleViolationError: NOT_FOUND_OR_FORBIDDEN, POLL_ALREADY_CLOSED
            ValidationError: END_AT_IN_PAST, END_AT_BEFORE_START
        """
        with logfire.span(
            "user_poll_service.extend",
            user_id=str(user_id),
            poll_id=str(poll_id),
            end_at=end_at.isoformat(),
        ):
            poll = await self.user_poll_repository.find_owned(poll_id, user_id)
            if poll is None:
                raise DomainError.from_code(ErrorCode.NOT_FOUND_OR_FORBIDDEN)

            now = self.clock.now()
            if poll.effective_status(now) == UserPollStatus.CLOSED:
                logfire.warn("Extend on closed poll", poll_id=str(poll_id))
                raise DomainError.from_code(ErrorCode.POLL_ALREADY_CLOSED)
            if end_at <= now:
                raise DomainError.from_code(ErrorCode.END_AT_IN_PAST)
            if poll.start_at is not None and end_at <= poll.start_at:
                raise DomainError.from_code(ErrorCode.END_AT_BEFORE_START)

            saved = await self.user_poll_repository.save(
                poll.model_copy(update={"end_at": end_at, "updated_at": now})
            )
            logfire.info("User poll extended", poll_id=str(poll_id))
            return saved

    async def create_owner_invite(
        self, user_id: UserId, poll_id: UserPollId
    ) -> UserPollInvite:
        """Get or mint the caller's own invite to a live, invite-only poll.

        An existing non-rejected invite for the caller's identity is returned
        as-is, so repeated calls yield the same token.

        Raises:
            NotFoundError: POLL_NOT_FOUND
            BusinessRuleViolationError: POLL_NOT_LIVE, POLL_NOT_INVITE_ONLY
        """
        with logfire.span(
            "user_poll_service.create_owner_invite",
            user_id=str(user_id),
            poll_id=str(poll_id),
        ):
            poll = await self.get_poll(poll_id)
            if poll.status != UserPollStatus.LIVE:
                raise DomainError.from_code(ErrorCode.POLL_NOT_LIVE)
            if not poll.is_invite_only:
                raise DomainError.from_code(ErrorCode.POLL_NOT_INVITE_ONLY)

            identity = user_identity(user_id)
            existing = await self._find_live_invite(poll_id, identity)
            if existing is not None:
                logfire.info("Reusing owner invite", invite_id=str(existing.id))
                return existing

            now = self.clock.now()
            invite = UserPollInvite(
                id=UserPollInviteId(uuid4()),
                poll_id=poll_id,
                mobile=identity,
                token=new_invite_token(),
                status=InviteStatus.PENDING,
                user_id=user_id,
                created_at=now,
                updated_at=now,
            )
            try:
                async with self.transaction_manager.transaction():
                    saved = await self.user_poll_invite_repository.save(invite)
            except IntegrityError:
                # Lost a race against a concurrent call; the winner's invite stands
                existing = await self._find_live_invite(poll_id, identity)
                if existing is None:
                    raise
                logfire.info("Owner invite created concurrently", invite_id=str(existing.id))
                return existing

            logfire.info("Owner invite created", invite_id=str(saved.id))
            return saved

    async def create_invites(
        self, user_id: UserId, poll_id: UserPollId, targets: InviteTargets
    ) -> list[UserPollInvite]:
        """Invite mobiles to a poll owned by the caller.

        Mobiles from owned groups, an inline new group and the raw list are
        merged on their whitespace-stripped form. Mobiles that already hold a
        live invite keep it; the stored invite is returned for every mobile.

        Args:
            user_id: Caller, must own the poll
            poll_id: User poll ID
            targets: Groups and mobiles to invite

        Returns:
            One invite per distinct mobile, in first-seen order

        Raises:
            BusinessRuleViolationError: NOT_FOUND_OR_FORBIDDEN
        """
        with logfire.span(
            "user_poll_service.create_invites",
            user_id=str(user_id),
            poll_id=str(poll_id),
            groups=len(targets.existing_group_ids),
            mobiles=len(targets.mobiles),
        ):
            poll = await self.user_poll_repository.find_owned(poll_id, user_id)
            if poll is None:
                raise DomainError.from_code(ErrorCode.NOT_FOUND_OR_FORBIDDEN)

            async with self.transaction_manager.transaction():
                mobiles: dict[str, None] = {}

                if targets.existing_group_ids:
                    groups = await self.invite_group_repository.find_owned(
                        user_id, targets.existing_group_ids
                    )
                    for group in groups:
                        for member in group.members:
                            mobiles[normalize_mobile(member)] = None

                if targets.new_group is not None and targets.new_group.mobiles:
                    group = await self._save_group(
                        user_id, targets.new_group.name, targets.new_group.mobiles
                    )
                    for member in group.members:
                        mobiles[member] = None

                for mobile in targets.mobiles:
                    mobiles[normalize_mobile(mobile)] = None

                mobiles.pop("", None)
                if not mobiles:
                    return []

                now = self.clock.now()
                inserted = await self.user_poll_invite_repository.save_many_skip_duplicates(
                    [
                        UserPollInvite(
                            id=UserPollInviteId(uuid4()),
                            poll_id=poll_id,
                            mobile=mobile,
                            token=new_invite_token(),
                            status=InviteStatus.PENDING,
                            created_at=now,
                            updated_at=now,
                        )
                        for mobile in mobiles
                    ]
                )
                stored = await self.user_poll_invite_repository.find_live_by_mobiles(
                    poll_id, list(mobiles)
                )

            by_mobile = {invite.mobile: invite for invite in stored}
            invites = [by_mobile[m] for m in mobiles if m in by_mobile]
            logfire.info(
                "User poll invites created",
                poll_id=str(poll_id),
                requested=len(mobiles),
                inserted=inserted,
            )
            return invites

    async def list_groups(self, user_id: UserId) -> list[InviteGroup]:
        """List the caller's invite groups, newest first."""
        with logfire.span("user_poll_service.list_groups", user_id=str(user_id)):
            return await self.invite_group_repository.find_by_owner(user_id)

    async def create_group(
        self, user_id: UserId, name: str, mobiles: list[str]
    ) -> InviteGroup:
        """Create a named invite group with normalised members."""
        with logfire.span(
            "user_poll_service.create_group", user_id=str(user_id), members=len(mobiles)
        ):
            group = await self._save_group(user_id, name, mobiles)
            logfire.info("Invite group created", group_id=str(group.id))
            return group

    async def update_group(
        self,
        user_id: UserId,
        group_id: InviteGroupId,
        name: str,
        mobiles: list[str],
    ) -> InviteGroup:
        """Rename a group and replace its members.

        Raises:
            NotFoundError: GROUP_NOT_FOUND unless the caller owns the group
        """
        with logfire.span(
            "user_poll_service.update_group",
            user_id=str(user_id),
            group_id=str(group_id),
        ):
            existing = await self.invite_group_repository.find_by_id(group_id)
            if existing is None or existing.owner_id != user_id:
                raise DomainError.from_code(ErrorCode.GROUP_NOT_FOUND)

            saved = await self.invite_group_repository.save(
                existing.model_copy(
                    update={"name": name, "members": _normalized_members(mobiles)}
                )
            )
            logfire.info("Invite group updated", group_id=str(group_id))
            return saved

    async def _save_group(
        self, user_id: UserId, name: str, mobiles: list[str]
    ) -> InviteGroup:
        group = InviteGroup(
            id=InviteGroupId(uuid4()),
            owner_id=user_id,
            name=name,
            members=_normalized_members(mobiles),
            created_at=self.clock.now(),
        )
        return await self.invite_group_repository.save(group)

    async def _find_live_invite(
        self, poll_id: UserPollId, identity: str
    ) -> UserPollInvite | None:
        found = await self.user_poll_invite_repository.find_live_by_mobiles(
            poll_id, [identity]
        )
        return found[0] if found else None


def _normalized_members(mobiles: list[str]) -> list[str]:
    members: dict[str, None] = {}
    for mobile in mobiles:
        normalized = normalize_mobile(mobile)
        if normalized:
            members[normalized] = None
    return list(members)
