"""Profile request use cases."""

from typing import Any

import logfire
from pydantic import BaseModel, Field

from pulse.domain.service import ProfileService
from pulse.domain.value import CategoryId, ProfileRequestId, UserId

from ..base import BaseUseCase, parse_id
from .common import (
    ProfileRequestResponse,
    RejectionRequest,
    ReviewRequest,
)


class SubmitProfileRequestRequest(BaseModel):
    """Submit profile request request."""

    category_id: str  # UUID string
    requested_name: str = Field(min_length=1, max_length=200)
    user_id: str  # Authenticated requester
    submitted_data: dict[str, Any] = Field(default_factory=dict)


class SubmitProfileRequestUseCase(BaseUseCase):
    """Use case for asking for a profile that does not exist yet."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(
        self, request: SubmitProfileRequestRequest
    ) -> ProfileRequestResponse:
        """Submit a PENDING request.

        Raises:
            NotFoundError: USER_NOT_FOUND
            BusinessRuleViolationError: INVALID_PROFILE_CATEGORY,
                CATEGORY_NOT_ALLOWED
            ConflictError: PROFILE_ALREADY_EXISTS
        """
        submitted = await self.profile_service.submit_request(
            parse_id(request.user_id, UserId),
            parse_id(request.category_id, CategoryId),
            request.requested_name,
            request.submitted_data,
        )
        return ProfileRequestResponse.from_request(submitted)


class ApproveProfileRequestUseCase(BaseUseCase):
    """Use case for approving a request, which creates its profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: ReviewRequest) -> ProfileRequestResponse:
        request_id = parse_id(request.target_id, ProfileRequestId)
        with logfire.span("approve_profile_request.execute", request_id=str(request_id)):
            approved = await self.profile_service.approve_request(
                parse_id(request.admin_id, UserId), request_id
            )
            return ProfileRequestResponse.from_request(approved)


class RejectProfileRequestUseCase(BaseUseCase):
    """Use case for rejecting a request with a reason."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: RejectionRequest) -> ProfileRequestResponse:
        rejected = await self.profile_service.reject_request(
            parse_id(request.admin_id, UserId),
            parse_id(request.target_id, ProfileRequestId),
            request.reason,
        )
        return ProfileRequestResponse.from_request(rejected)
