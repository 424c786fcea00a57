"""Shared user poll DTOs."""

from datetime import datetime

from pydantic import BaseModel

from pulse.config import Settings
from pulse.domain.model import InviteGroup, UserPoll, UserPollInvite
from pulse.domain.value import (
    InviteStatus,
    UserPollStatus,
    UserPollType,
)


class UserPollOptionItem(BaseModel):
    """Answer option of a user poll."""

    option_id: str
    label: str
    display_order: int


class UserPollResponse(BaseModel):
    """User poll with the status a reader observes now."""

    poll_id: str
    creator_id: str
    category_id: str
    title: str
    description: str | None
    source_info: str | None
    type: UserPollType
    status: UserPollStatus
    is_invite_only: bool
    start_at: datetime | None
    end_at: datetime | None
    options: list[UserPollOptionItem]
    created_at: datetime

    @classmethod
    def from_poll(cls, poll: UserPoll, now: datetime) -> "UserPollResponse":
        return cls(
            poll_id=str(poll.id),
            creator_id=str(poll.creator_id),
            category_id=str(poll.category_id),
            title=poll.title,
            description=poll.description,
            source_info=poll.source_info,
            type=poll.type,
            status=poll.effective_status(now),
            is_invite_only=poll.is_invite_only,
            start_at=poll.start_at,
            end_at=poll.end_at,
            options=[
                UserPollOptionItem(
                    option_id=str(option.id),
                    label=option.label,
                    display_order=option.display_order,
                )
                for option in poll.options
            ],
            created_at=poll.created_at,
        )


class InviteLinkItem(BaseModel):
    """Invite addressed to one mobile, with its share link."""

    invite_id: str
    mobile: str
    token: str
    status: InviteStatus
    share_url: str

    @classmethod
    def from_invite(
        cls, invite: UserPollInvite, settings: Settings
    ) -> "InviteLinkItem":
        return cls(
            invite_id=str(invite.id),
            mobile=invite.mobile,
            token=str(invite.token),
            status=invite.status,
            share_url=share_url(settings, invite),
        )


class InviteGroupResponse(BaseModel):
    """Invite group."""

    group_id: str
    name: str
    members: list[str]
    created_at: datetime

    @classmethod
    def from_group(cls, group: InviteGroup) -> "InviteGroupResponse":
        return cls(
            group_id=str(group.id),
            name=group.name,
            members=list(group.members),
            created_at=group.created_at,
        )


def share_url(settings: Settings, invite: UserPollInvite) -> str:
    """Frontend link that opens a poll with an invite token."""
    return f"{settings.api.frontend_url}/polls/{invite.poll_id}?invite={invite.token}"
