"""Get user poll use case."""

from pydantic import BaseModel

from pulse.domain.service import Clock, UserPollService
from pulse.domain.value import UserPollId

from ..base import BaseUseCase, parse_id
from .common import UserPollResponse


class GetUserPollRequest(BaseModel):
    """Get user poll request."""

    poll_id: str  # UUID string


class GetUserPollUseCase(BaseUseCase):
    """Use case for reading a user poll with its observed status."""

    def __init__(self, user_poll_service: UserPollService, clock: Clock) -> None:
        self.user_poll_service = user_poll_service
        self.clock = clock

    async def execute(self, request: GetUserPollRequest) -> UserPollResponse:
        poll = await self.user_poll_service.get_poll(
            parse_id(request.poll_id, UserPollId)
        )
        return UserPollResponse.from_poll(poll, self.clock.now())
