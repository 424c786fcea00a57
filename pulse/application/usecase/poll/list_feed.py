"""List feed use case."""

from pydantic import BaseModel

from pulse.domain.service import PollService

from ..base import BaseUseCase
from .common import PollResponse


class ListFeedResponse(BaseModel):
    """Public, open polls."""

    polls: list[PollResponse]


class ListFeedUseCase(BaseUseCase):
    """Use case for the public poll feed."""

    def __init__(self, poll_service: PollService) -> None:
        self.poll_service = poll_service

    async def execute(self, request: None = None) -> ListFeedResponse:
        polls = await self.poll_service.list_feed()
        return ListFeedResponse(polls=[PollResponse.from_poll(p) for p in polls])
