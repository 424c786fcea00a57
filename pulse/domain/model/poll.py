"""Admin-curated poll entities."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pulse.domain.model.common import DomainModel, utc_now
from pulse.domain.value import (
    CategoryId,
    InviteToken,
    PollConfigId,
    PollId,
    PollInviteId,
    PollStatus,
)


class Poll(DomainModel):
    """Admin poll.

    Business rules:
    - DRAFT -> PUBLISHED -> CLOSED, one-directional
    - Mutation only while DRAFT
    - Publishing requires an active, allowed category and an ACTIVE config
    """

    id: PollId
    title: str
    description: Optional[str] = None
    category_id: CategoryId
    poll_config_id: PollConfigId
    status: PollStatus = PollStatus.DRAFT
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class PollInvite(DomainModel):
    """Invite token granting a vote on an admin poll."""

    id: PollInviteId
    poll_id: PollId
    token: InviteToken
    created_at: datetime = Field(default_factory=utc_now)
