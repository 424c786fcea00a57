"""User-created poll entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pulse.domain.model.common import DomainModel, utc_now
from pulse.domain.value import (
    CategoryId,
    UserId,
    UserPollId,
    UserPollOptionId,
    UserPollStatus,
    UserPollType,
)


class UserPollOption(DomainModel):
    """Answer option of a user poll, ordered by ``display_order``."""

    id: UserPollOptionId
    label: str
    display_order: int


class UserPoll(DomainModel):
    """User poll.

    Created directly into LIVE (instant start) or SCHEDULED (future start).
    Ends explicitly, or lazily once ``end_at`` has passed.
    """

    id: UserPollId
    creator_id: UserId
    category_id: CategoryId
    title: str
    description: Optional[str] = None
    source_info: Optional[str] = None
    type: UserPollType
    status: UserPollStatus
    is_invite_only: bool = True
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    options: list[UserPollOption] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def effective_status(self, now: datetime) -> UserPollStatus:
        """Status as observed by a reader at ``now``.

        No scheduler flips statuses; readers compare timestamps instead.
        """
        if self.status == UserPollStatus.CLOSED:
            return UserPollStatus.CLOSED
        if self.end_at is not None and self.end_at <= now:
            return UserPollStatus.CLOSED
        if (
            self.status == UserPollStatus.SCHEDULED
            and self.start_at is not None
            and self.start_at <= now
        ):
            return UserPollStatus.LIVE
        return self.status
