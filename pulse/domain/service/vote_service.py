"""Vote integrity engine."""

from typing import Any
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from pulse.domain.error import DomainError, ErrorCode
from pulse.domain.model.poll import Poll
from pulse.domain.model.poll_config import PollConfig
from pulse.domain.model.vote import Vote
from pulse.domain.repository import (
    PollConfigRepository,
    PollInviteRepository,
    PollRepository,
    TransactionManager,
    VoteRepository,
)
from pulse.domain.value import (
    InviteToken,
    PollId,
    PollInviteId,
    PollStatus,
    PollUiTemplate,
    UserId,
    VoteId,
)

from .base import Service
from .clock import Clock

YES_NO_CHOICES = ("YES", "NO")


class VoteAuditLog:
    """Best-effort audit trail of recorded votes.

    Carries identities only, never the response content.
    """

    def record(self, vote: Vote) -> None:
        logfire.info(
            "Vote recorded",
            poll_id=str(vote.poll_id),
            user_id=str(vote.user_id) if vote.user_id else None,
            invite_id=str(vote.invite_id) if vote.invite_id else None,
        )


def validate_response_shape(config: PollConfig, response: Any) -> None:
    """Check a response against the config's content rules and UI template.

    Raises:
        ValidationError: INVALID_RESPONSE
    """
    if not isinstance(response, dict):
        raise DomainError.from_code(
            ErrorCode.INVALID_RESPONSE, "Response must be an object"
        )

    content = config.rules.content_rules
    selected = response.get("selectedOptions")
    if content is not None and isinstance(selected, list):
        if content.min_options is not None and len(selected) < content.min_options:
            raise DomainError.from_code(
                ErrorCode.INVALID_RESPONSE, "Too few options selected"
            )
        if content.max_options is not None and len(selected) > content.max_options:
            raise DomainError.from_code(
                ErrorCode.INVALID_RESPONSE, "Too many options selected"
            )

    if config.ui_template == PollUiTemplate.YES_NO and "choice" in response:
        if response["choice"] not in YES_NO_CHOICES:
            raise DomainError.from_code(
                ErrorCode.INVALID_RESPONSE, "choice must be YES or NO"
            )

    if config.ui_template == PollUiTemplate.RATING and "value" in response:
        value = response["value"]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DomainError.from_code(
                ErrorCode.INVALID_RESPONSE, "value must be numeric"
            )


class VoteService(Service):
    """Domain service casting votes on admin polls.

    Enforces the live window, the invite/auth requirement, one vote per
    (poll, user) and per (poll, invite), and the response shape.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        poll_repository: PollRepository,
        poll_config_repository: PollConfigRepository,
        poll_invite_repository: PollInviteRepository,
        transaction_manager: TransactionManager,
        audit_log: VoteAuditLog,
        clock: Clock,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            poll_repository: Poll repository
            poll_config_repository: Poll config repository
            poll_invite_repository: Poll invite repository
            transaction_manager: Transaction boundary
            audit_log: Audit trail of recorded votes
            clock: Time source
        """
        self.vote_repository = vote_repository
        self.poll_repository = poll_repository
        self.poll_config_repository = poll_config_repository
        self.poll_invite_repository = poll_invite_repository
        self.transaction_manager = transaction_manager
        self.audit_log = audit_log
        self.clock = clock

    async def cast_vote(
        self,
        poll_id: PollId,
        response: Any,
        user_id: UserId | None = None,
        invite_token: InviteToken | None = None,
    ) -> Vote:
        """Cast a vote.

        Args:
            poll_id: Poll to vote on
            response: Opaque response document, checked against the poll config
            user_id: Authenticated voter, if any
            invite_token: Invite token, if any

        Returns:
            The persisted vote, bound to every resolved identity facet

        Raises:
            NotFoundError: NOT_FOUND
            BusinessRuleViolationError: POLL_NOT_PUBLISHED, POLL_NOT_STARTED,
                POLL_ENDED, INVALID_INVITE, INVITE_REQUIRED,
                AUTH_OR_INVITE_REQUIRED
            ConflictError: ALREADY_VOTED
            ValidationError: INVALID_RESPONSE
        """
        with logfire.span(
            "vote_service.cast_vote",
            poll_id=str(poll_id),
            authenticated=user_id is not None,
            with_invite=invite_token is not None,
        ):
            poll = await self.poll_repository.find_by_id(poll_id)
            config = (
                await self.poll_config_repository.find_by_id(poll.poll_config_id)
                if poll is not None
                else None
            )
            if poll is None or config is None:
                raise DomainError.from_code(ErrorCode.NOT_FOUND)

            self._ensure_live(poll)

            invite_id = await self._resolve_invite(poll_id, invite_token)
            if config.invite_only:
                if invite_id is None:
                    logfire.warn("Invite required", poll_id=str(poll_id))
                    raise DomainError.from_code(ErrorCode.INVITE_REQUIRED)
            elif user_id is None and invite_id is None:
                raise DomainError.from_code(ErrorCode.AUTH_OR_INVITE_REQUIRED)

            if user_id is not None:
                if await self.vote_repository.find_by_poll_and_user(poll_id, user_id):
                    logfire.warn(
                        "Duplicate vote attempt", poll_id=str(poll_id), user_id=str(user_id)
                    )
                    raise DomainError.from_code(ErrorCode.ALREADY_VOTED)
            if invite_id is not None:
                if await self.vote_repository.find_by_poll_and_invite(poll_id, invite_id):
                    logfire.warn(
                        "Duplicate vote attempt",
                        poll_id=str(poll_id),
                        invite_id=str(invite_id),
                    )
                    raise DomainError.from_code(ErrorCode.ALREADY_VOTED)

            validate_response_shape(config, response)

            vote = Vote(
                id=VoteId(uuid4()),
                poll_id=poll_id,
                poll_config_id=poll.poll_config_id,
                user_id=user_id,
                invite_id=invite_id,
                response=response,
                created_at=self.clock.now(),
            )
            try:
                async with self.transaction_manager.transaction():
                    saved = await self.vote_repository.save(vote)
            except IntegrityError:
                # A concurrent cast for the same identity won the insert
                logfire.warn("Duplicate vote rejected by store", poll_id=str(poll_id))
                raise DomainError.from_code(ErrorCode.ALREADY_VOTED)

            try:
                self.audit_log.record(saved)
            except Exception as e:
                logfire.warn("Vote audit failed", poll_id=str(poll_id), error=str(e))

            return saved

    def _ensure_live(self, poll: Poll) -> None:
        if poll.status != PollStatus.PUBLISHED:
            raise DomainError.from_code(ErrorCode.POLL_NOT_PUBLISHED)

        now = self.clock.now()
        if poll.start_at is not None and poll.start_at > now:
            raise DomainError.from_code(ErrorCode.POLL_NOT_STARTED)
        if poll.end_at is not None and poll.end_at <= now:
            logfire.warn("Vote on ended poll", poll_id=str(poll.id))
            raise DomainError.from_code(ErrorCode.POLL_ENDED)

    async def _resolve_invite(
        self, poll_id: PollId, token: InviteToken | None
    ) -> PollInviteId | None:
        if token is None:
            return None
        invite = await self.poll_invite_repository.find_by_token(token)
        if invite is None or invite.poll_id != poll_id:
            logfire.warn("Invalid invite", poll_id=str(poll_id))
            raise DomainError.from_code(ErrorCode.INVALID_INVITE)
        return invite.id
