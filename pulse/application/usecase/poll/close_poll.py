"""Close poll use case."""

from pulse.domain.service import PollService
from pulse.domain.value import PollId

from ..base import BaseUseCase, parse_id
from .common import PollIdRequest, PollResponse


class ClosePollUseCase(BaseUseCase):
    """Use case for closing a PUBLISHED admin poll."""

    def __init__(self, poll_service: PollService) -> None:
        self.poll_service = poll_service

    async def execute(self, request: PollIdRequest) -> PollResponse:
        poll = await self.poll_service.close(parse_id(request.poll_id, PollId))
        return PollResponse.from_poll(poll)
