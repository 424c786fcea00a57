"""Cast vote use case."""

from datetime import datetime
from typing import Any

import logfire
import pydantic
from pydantic import BaseModel

from pulse.domain.error import DomainError, ErrorCode
from pulse.domain.service import VoteService
from pulse.domain.value import InviteToken, PollId, UserId

from ..base import BaseUseCase, parse_id


class CastVoteRequest(BaseModel):
    """Cast vote request.

    At least one of ``user_id`` and ``invite_token`` is needed; which one
    depends on the poll's permissions.
    """

    poll_id: str  # UUID string
    response: Any  # Shape-checked against the poll config
    user_id: str | None = None  # From the authenticated caller, if any
    invite_token: str | None = None


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    vote_id: str
    poll_id: str
    created_at: datetime


class CastVoteUseCase(BaseUseCase):
    """Use case for casting a vote on an admin poll."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute the vote flow.

        Args:
            request: Cast vote request

        Returns:
            The stored vote

        Raises:
            NotFoundError: NOT_FOUND
            BusinessRuleViolationError: POLL_NOT_PUBLISHED, POLL_NOT_STARTED,
                POLL_ENDED, INVALID_INVITE, INVITE_REQUIRED,
                AUTH_OR_INVITE_REQUIRED
            ConflictError: ALREADY_VOTED
            ValidationError: INVALID_ID, INVALID_RESPONSE
        """
        poll_id = parse_id(request.poll_id, PollId)
        user_id = parse_id(request.user_id, UserId) if request.user_id else None
        invite_token = _parse_invite(request.invite_token)

        with logfire.span(
            "cast_vote.execute",
            poll_id=str(poll_id),
            authenticated=user_id is not None,
            with_invite=invite_token is not None,
        ):
            vote = await self.vote_service.cast_vote(
                poll_id, request.response, user_id=user_id, invite_token=invite_token
            )
            return CastVoteResponse(
                vote_id=str(vote.id),
                poll_id=str(vote.poll_id),
                created_at=vote.created_at,
            )


def _parse_invite(value: str | None) -> InviteToken | None:
    if not value:
        return None
    try:
        return InviteToken(value)
    except pydantic.ValidationError:
        raise DomainError.from_code(ErrorCode.INVALID_INVITE)
