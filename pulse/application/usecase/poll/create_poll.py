"""Create poll use case."""

import logfire

from pulse.domain.service import PollDraft, PollService

from ..base import BaseUseCase
from .common import PollResponse


class CreatePollRequest(PollDraft):
    """Create poll request."""


class CreatePollUseCase(BaseUseCase):
    """Use case for creating a DRAFT admin poll."""

    def __init__(self, poll_service: PollService) -> None:
        """Initialize create poll use case.

        Args:
            poll_service: Poll domain service
        """
        self.poll_service = poll_service

    async def execute(self, request: CreatePollRequest) -> PollResponse:
        """Create the poll after the category and config checks.

        Raises:
            NotFoundError: CATEGORY_NOT_FOUND, CONFIG_NOT_FOUND
            BusinessRuleViolationError: CATEGORY_NOT_CHILD, CATEGORY_NOT_ACTIVE,
                CATEGORY_NOT_ALLOWED, CONFIG_NOT_ACTIVE
        """
        with logfire.span("create_poll.execute", title=request.title):
            poll = await self.poll_service.create(request)
            return PollResponse.from_poll(poll)
