"""Shared invite DTOs."""

from datetime import datetime

import pydantic
from pydantic import BaseModel

from pulse.domain.error import DomainError, ErrorCode
from pulse.domain.service import InviteWithPoll
from pulse.domain.value import InviteStatus, InviteToken, UserPollStatus


class InviteTokenRequest(BaseModel):
    """Request addressed by invite token."""

    token: str


class InvitePollSummary(BaseModel):
    """The poll an invite grants access to."""

    poll_id: str
    title: str
    description: str | None
    status: UserPollStatus
    end_at: datetime | None


class InviteResponse(BaseModel):
    """Invite state together with its poll."""

    invite_id: str
    token: str
    status: InviteStatus
    poll: InvitePollSummary

    @classmethod
    def from_invite(cls, result: InviteWithPoll, now: datetime) -> "InviteResponse":
        invite, poll = result.invite, result.poll
        return cls(
            invite_id=str(invite.id),
            token=str(invite.token),
            status=invite.status,
            poll=InvitePollSummary(
                poll_id=str(poll.id),
                title=poll.title,
                description=poll.description,
                status=poll.effective_status(now),
                end_at=poll.end_at,
            ),
        )


def parse_token(value: str) -> InviteToken:
    """Parse a raw token; malformed tokens cannot match any invite.

    Raises:
        NotFoundError: INVITE_NOT_FOUND
    """
    try:
        return InviteToken(value)
    except pydantic.ValidationError:
        raise DomainError.from_code(ErrorCode.INVITE_NOT_FOUND)
