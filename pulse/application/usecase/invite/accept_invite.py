"""Accept invite use case."""

import logfire

from pulse.domain.service import Clock, InviteService
from pulse.domain.value import UserId

from ..base import BaseUseCase, parse_id
from .common import InviteResponse, InviteTokenRequest, parse_token


class AcceptInviteRequest(InviteTokenRequest):
    """Accept invite request."""

    user_id: str  # Authenticated caller


class AcceptInviteUseCase(BaseUseCase):
    """Use case for accepting an invite and binding it to the caller."""

    def __init__(self, invite_service: InviteService, clock: Clock) -> None:
        """Initialize accept invite use case.

        Args:
            invite_service: Invite domain service
            clock: Time source for the observed poll status
        """
        self.invite_service = invite_service
        self.clock = clock

    async def execute(self, request: AcceptInviteRequest) -> InviteResponse:
        user_id = parse_id(request.user_id, UserId)
        with logfire.span("accept_invite.execute", user_id=str(user_id)):
            result = await self.invite_service.accept(
                parse_token(request.token), user_id
            )
            return InviteResponse.from_invite(result, self.clock.now())
