"""Create invites use case."""

import logfire
from pydantic import BaseModel

from pulse.config import Settings
from pulse.domain.service import InviteTargets, UserPollService
from pulse.domain.value import UserId, UserPollId

from ..base import BaseUseCase, parse_id
from .common import InviteLinkItem


class CreateInvitesRequest(InviteTargets):
    """Create invites request."""

    poll_id: str  # UUID string
    user_id: str  # Must own the poll


class CreateInvitesResponse(BaseModel):
    """One invite per distinct mobile, in first-seen order."""

    poll_id: str
    invites: list[InviteLinkItem]


class CreateInvitesUseCase(BaseUseCase):
    """Use case for inviting mobiles and groups to a user poll."""

    def __init__(self, user_poll_service: UserPollService, settings: Settings) -> None:
        """Initialize create invites use case.

        Args:
            user_poll_service: User poll domain service
            settings: Application settings (frontend URL for share links)
        """
        self.user_poll_service = user_poll_service
        self.settings = settings

    async def execute(self, request: CreateInvitesRequest) -> CreateInvitesResponse:
        """Invite every mobile, reusing live invites.

        Raises:
            BusinessRuleViolationError: NOT_FOUND_OR_FORBIDDEN
        """
        poll_id = parse_id(request.poll_id, UserPollId)
        user_id = parse_id(request.user_id, UserId)
        targets = InviteTargets(
            mobiles=request.mobiles,
            existing_group_ids=request.existing_group_ids,
            new_group=request.new_group,
        )

        with logfire.span("create_invites.execute", poll_id=str(poll_id)):
            invites = await self.user_poll_service.create_invites(
                user_id, poll_id, targets
            )
            return CreateInvitesResponse(
                poll_id=str(poll_id),
                invites=[
                    InviteLinkItem.from_invite(invite, self.settings)
                    for invite in invites
                ],
            )
