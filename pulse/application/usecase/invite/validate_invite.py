"""Validate invite use case."""

from pulse.domain.service import Clock, InviteService

from ..base import BaseUseCase
from .common import InviteResponse, InviteTokenRequest, parse_token


class ValidateInviteUseCase(BaseUseCase):
    """Use case for checking an invite link before it is answered."""

    def __init__(self, invite_service: InviteService, clock: Clock) -> None:
        self.invite_service = invite_service
        self.clock = clock

    async def execute(self, request: InviteTokenRequest) -> InviteResponse:
        """Resolve the token.

        Raises:
            NotFoundError: INVITE_NOT_FOUND
            BusinessRuleViolationError: INVITE_ALREADY_USED, POLL_NOT_LIVE
        """
        result = await self.invite_service.validate(parse_token(request.token))
        return InviteResponse.from_invite(result, self.clock.now())
