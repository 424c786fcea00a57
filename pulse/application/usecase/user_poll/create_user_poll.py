"""Create user poll use case."""

import logfire

from pulse.domain.service import Clock, UserPollDraft, UserPollService
from pulse.domain.value import UserId

from ..base import BaseUseCase, parse_id
from .common import UserPollResponse


class CreateUserPollRequest(UserPollDraft):
    """Create user poll request."""

    creator_id: str  # Authenticated caller


class CreateUserPollUseCase(BaseUseCase):
    """Use case for creating a user poll directly into LIVE or SCHEDULED."""

    def __init__(self, user_poll_service: UserPollService, clock: Clock) -> None:
        """Initialize create user poll use case.

        Args:
            user_poll_service: User poll domain service
            clock: Time source for the observed status
        """
        self.user_poll_service = user_poll_service
        self.clock = clock

    async def execute(self, request: CreateUserPollRequest) -> UserPollResponse:
        """Create the poll.

        Raises:
            NotFoundError: CATEGORY_NOT_FOUND
            BusinessRuleViolationError: CATEGORY_NOT_CHILD, CATEGORY_NOT_ACTIVE,
                CATEGORY_NOT_ALLOWED
            ValidationError: INVALID_START_AT, END_AT_BEFORE_START
        """
        creator_id = parse_id(request.creator_id, UserId)
        with logfire.span("create_user_poll.execute", creator_id=str(creator_id)):
            draft = UserPollDraft.model_validate(
                request.model_dump(exclude={"creator_id"})
            )
            poll = await self.user_poll_service.create(creator_id, draft)
            return UserPollResponse.from_poll(poll, self.clock.now())
