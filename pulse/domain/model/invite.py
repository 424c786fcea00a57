"""User poll invite entities.

Invites are addressed to a mobile number, or to a registered user through
the synthetic ``user:<id>`` identity.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pulse.domain.model.common import DomainModel, utc_now
from pulse.domain.value import (
    InviteGroupId,
    InviteStatus,
    InviteToken,
    UserId,
    UserPollId,
    UserPollInviteId,
)


class UserPollInvite(DomainModel):
    """Invite to a user poll.

    Business rules:
    - PENDING -> ACCEPTED | REJECTED, both terminal
    - At most one non-rejected invite per (poll, mobile)
    - Accepting binds the accepting user onto the invite
    """

    id: UserPollInviteId
    poll_id: UserPollId
    mobile: str
    token: InviteToken
    status: InviteStatus = InviteStatus.PENDING
    user_id: Optional[UserId] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class InviteGroup(DomainModel):
    """Named, reusable list of mobiles owned by a user."""

    id: InviteGroupId
    owner_id: UserId
    name: str
    members: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
