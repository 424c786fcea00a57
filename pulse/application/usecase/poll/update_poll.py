"""Update poll use case."""

from pulse.domain.service import PollChanges, PollService
from pulse.domain.value import PollId

from ..base import BaseUseCase, parse_id
from .common import PollIdRequest, PollResponse


class UpdatePollRequest(PollIdRequest):
    """Update poll request."""

    changes: PollChanges


class UpdatePollUseCase(BaseUseCase):
    """Use case for editing a DRAFT admin poll."""

    def __init__(self, poll_service: PollService) -> None:
        self.poll_service = poll_service

    async def execute(self, request: UpdatePollRequest) -> PollResponse:
        poll = await self.poll_service.update(
            parse_id(request.poll_id, PollId), request.changes
        )
        return PollResponse.from_poll(poll)
