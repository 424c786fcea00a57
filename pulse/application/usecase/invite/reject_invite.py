"""Reject invite use case."""

from pulse.domain.service import Clock, InviteService

from ..base import BaseUseCase
from .common import InviteResponse, InviteTokenRequest, parse_token


class RejectInviteUseCase(BaseUseCase):
    """Use case for declining an invite. No authentication is needed."""

    def __init__(self, invite_service: InviteService, clock: Clock) -> None:
        self.invite_service = invite_service
        self.clock = clock

    async def execute(self, request: InviteTokenRequest) -> InviteResponse:
        result = await self.invite_service.reject(parse_token(request.token))
        return InviteResponse.from_invite(result, self.clock.now())
