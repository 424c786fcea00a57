"""Shared admin poll DTOs."""

from datetime import datetime

from pydantic import BaseModel

from pulse.domain.model import Poll
from pulse.domain.value import PollStatus


class PollResponse(BaseModel):
    """Admin poll as stored."""

    poll_id: str
    title: str
    description: str | None
    category_id: str
    poll_config_id: str
    status: PollStatus
    start_at: datetime | None
    end_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_poll(cls, poll: Poll) -> "PollResponse":
        return cls(
            poll_id=str(poll.id),
            title=poll.title,
            description=poll.description,
            category_id=str(poll.category_id),
            poll_config_id=str(poll.poll_config_id),
            status=poll.status,
            start_at=poll.start_at,
            end_at=poll.end_at,
            created_at=poll.created_at,
            updated_at=poll.updated_at,
        )


class PollIdRequest(BaseModel):
    """Request addressing a single admin poll."""

    poll_id: str  # UUID string
