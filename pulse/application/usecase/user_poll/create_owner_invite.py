"""Create owner invite use case."""

from pydantic import BaseModel

from pulse.config import Settings
from pulse.domain.service import UserPollService
from pulse.domain.value import UserId, UserPollId

from ..base import BaseUseCase, parse_id
from .common import InviteLinkItem


class CreateOwnerInviteRequest(BaseModel):
    """Create owner invite request."""

    poll_id: str  # UUID string
    user_id: str  # Authenticated caller


class CreateOwnerInviteUseCase(BaseUseCase):
    """Use case for getting the caller's own invite link to a poll.

    Idempotent: repeated calls return the same token.
    """

    def __init__(self, user_poll_service: UserPollService, settings: Settings) -> None:
        self.user_poll_service = user_poll_service
        self.settings = settings

    async def execute(self, request: CreateOwnerInviteRequest) -> InviteLinkItem:
        invite = await self.user_poll_service.create_owner_invite(
            parse_id(request.user_id, UserId), parse_id(request.poll_id, UserPollId)
        )
        return InviteLinkItem.from_invite(invite, self.settings)
