"""User poll invite ledger."""

import logfire
from pydantic import BaseModel, ConfigDict

from pulse.domain.error import DomainError, ErrorCode
from pulse.domain.model.invite import UserPollInvite
from pulse.domain.model.user_poll import UserPoll
from pulse.domain.repository import (
    TransactionManager,
    UserPollInviteRepository,
    UserPollRepository,
)
from pulse.domain.value import InviteStatus, InviteToken, UserId, UserPollStatus

from .base import Service
from .clock import Clock

ACTIVE_POLL_STATUSES = (UserPollStatus.LIVE, UserPollStatus.SCHEDULED)


class InviteWithPoll(BaseModel):
    """An invite together with the poll it grants access to."""

    model_config = ConfigDict(frozen=True)

    invite: UserPollInvite
    poll: UserPoll


class InviteService(Service):
    """Domain service for the invite lifecycle.

    PENDING -> ACCEPTED | REJECTED, both terminal. Transitions run inside a
    single transaction with the invite row locked, and every precondition is
    re-checked under that lock.
    """

    def __init__(
        self,
        user_poll_invite_repository: UserPollInviteRepository,
        user_poll_repository: UserPollRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        """Initialize invite service.

        Args:
            user_poll_invite_repository: User poll invite repository
            user_poll_repository: User poll repository
            transaction_manager: Transaction boundary
            clock: Time source
        """
        self.user_poll_invite_repository = user_poll_invite_repository
        self.user_poll_repository = user_poll_repository
        self.transaction_manager = transaction_manager
        self.clock = clock

    async def validate(self, token: InviteToken) -> InviteWithPoll:
        """Check that a token is usable.

        Args:
            token: Invite token

        Returns:
            The pending invite and its poll

        Raises:
            NotFoundError: INVITE_NOT_FOUND
            ConflictError: INVITE_ALREADY_USED
            BusinessRuleViolationError: POLL_NOT_ACTIVE
        """
        with logfire.span("invite_service.validate", token=token.root[:8] + "..."):
            invite = await self.user_poll_invite_repository.find_by_token(token)
            return await self._check_usable(invite)

    async def accept(self, token: InviteToken, user_id: UserId) -> InviteWithPoll:
        """Accept an invite and bind the accepting user onto it.

        Raises:
            NotFoundError: INVITE_NOT_FOUND
            ConflictError: INVITE_ALREADY_USED
            BusinessRuleViolationError: POLL_NOT_ACTIVE
        """
        with logfire.span(
            "invite_service.accept",
            token=token.root[:8] + "...",
            user_id=str(user_id),
        ):
            result = await self._transition(token, InviteStatus.ACCEPTED, user_id)
            logfire.info(
                "Invite accepted", invite_id=str(result.invite.id), user_id=str(user_id)
            )
            return result

    async def reject(self, token: InviteToken) -> InviteWithPoll:
        """Reject an invite.

        Raises:
            NotFoundError: INVITE_NOT_FOUND
            ConflictError: INVITE_ALREADY_USED
            BusinessRuleViolationError: POLL_NOT_ACTIVE
        """
        with logfire.span("invite_service.reject", token=token.root[:8] + "..."):
            result = await self._transition(token, InviteStatus.REJECTED, None)
            logfire.info("Invite rejected", invite_id=str(result.invite.id))
            return result

    async def _transition(
        self,
        token: InviteToken,
        status: InviteStatus,
        user_id: UserId | None,
    ) -> InviteWithPoll:
        async with self.transaction_manager.transaction():
            invite = await self.user_poll_invite_repository.find_by_token_for_update(
                token
            )
            checked = await self._check_usable(invite)

            update: dict = {"status": status, "updated_at": self.clock.now()}
            if user_id is not None:
                update["user_id"] = user_id
            saved = await self.user_poll_invite_repository.save(
                checked.invite.model_copy(update=update)
            )
            return InviteWithPoll(invite=saved, poll=checked.poll)

    async def _check_usable(self, invite: UserPollInvite | None) -> InviteWithPoll:
        if invite is None:
            logfire.warn("Invite not found")
            raise DomainError.from_code(ErrorCode.INVITE_NOT_FOUND)
        if invite.status != InviteStatus.PENDING:
            logfire.warn(
                "Invite already used",
                invite_id=str(invite.id),
                status=invite.status.value,
            )
            raise DomainError.from_code(ErrorCode.INVITE_ALREADY_USED)

        poll = await self.user_poll_repository.find_by_id(invite.poll_id)
        if poll is None or poll.status not in ACTIVE_POLL_STATUSES:
            logfire.warn("Invite poll not active", invite_id=str(invite.id))
            raise DomainError.from_code(ErrorCode.POLL_NOT_ACTIVE)
        return InviteWithPoll(invite=invite, poll=poll)
