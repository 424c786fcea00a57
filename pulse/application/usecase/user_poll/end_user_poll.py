"""End user poll use case."""

from pydantic import BaseModel

from pulse.domain.service import Clock, UserPollService
from pulse.domain.value import UserId, UserPollId

from ..base import BaseUseCase, parse_id
from .common import UserPollResponse


class EndUserPollRequest(BaseModel):
    """End user poll request."""

    poll_id: str  # UUID string
    user_id: str  # Must own the poll


class EndUserPollUseCase(BaseUseCase):
    """Use case for ending a user poll early."""

    def __init__(self, user_poll_service: UserPollService, clock: Clock) -> None:
        self.user_poll_service = user_poll_service
        self.clock = clock

    async def execute(self, request: EndUserPollRequest) -> UserPollResponse:
        poll = await self.user_poll_service.end(
            parse_id(request.user_id, UserId), parse_id(request.poll_id, UserPollId)
        )
        return UserPollResponse.from_poll(poll, self.clock.now())
