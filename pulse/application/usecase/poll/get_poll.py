"""Get poll use case."""

from pulse.domain.repository import VoteRepository
from pulse.domain.service import PollService
from pulse.domain.value import PollId

from ..base import BaseUseCase, parse_id
from .common import PollIdRequest, PollResponse


class GetPollResponse(PollResponse):
    """Admin poll with its vote count."""

    vote_count: int


class GetPollUseCase(BaseUseCase):
    """Use case for reading an admin poll."""

    def __init__(
        self, poll_service: PollService, vote_repository: VoteRepository
    ) -> None:
        self.poll_service = poll_service
        self.vote_repository = vote_repository

    async def execute(self, request: PollIdRequest) -> GetPollResponse:
        poll = await self.poll_service.get_poll(parse_id(request.poll_id, PollId))
        vote_count = await self.vote_repository.count_by_poll(poll.id)
        return GetPollResponse(
            **PollResponse.from_poll(poll).model_dump(), vote_count=vote_count
        )
