"""Extend user poll use case."""

from pydantic import AwareDatetime, BaseModel

from pulse.domain.service import Clock, UserPollService
from pulse.domain.value import UserId, UserPollId

from ..base import BaseUseCase, parse_id
from .common import UserPollResponse


class ExtendUserPollRequest(BaseModel):
    """Extend user poll request."""

    poll_id: str  # UUID string
    user_id: str  # Must own the poll
    end_at: AwareDatetime


class ExtendUserPollUseCase(BaseUseCase):
    """Use case for moving the end of a user poll."""

    def __init__(self, user_poll_service: UserPollService, clock: Clock) -> None:
        self.user_poll_service = user_poll_service
        self.clock = clock

    async def execute(self, request: ExtendUserPollRequest) -> UserPollResponse:
        """Move ``end_at``.

        Raises:
            BusinessRuleViolationError: NOT_FOUND_OR_FORBIDDEN, POLL_ALREADY_CLOSED
            ValidationError: END_AT_IN_PAST, END_AT_BEFORE_START
        """
        poll = await self.user_poll_service.extend(
            parse_id(request.user_id, UserId),
            parse_id(request.poll_id, UserPollId),
            request.end_at,
        )
        return UserPollResponse.from_poll(poll, self.clock.now())
