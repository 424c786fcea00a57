"""Publish poll use case."""

from pulse.domain.service import PollService
from pulse.domain.value import PollId

from ..base import BaseUseCase, parse_id
from .common import PollIdRequest, PollResponse


class PublishPollUseCase(BaseUseCase):
    """Use case for publishing a DRAFT admin poll."""

    def __init__(self, poll_service: PollService) -> None:
        self.poll_service = poll_service

    async def execute(self, request: PollIdRequest) -> PollResponse:
        poll = await self.poll_service.publish(parse_id(request.poll_id, PollId))
        return PollResponse.from_poll(poll)
