"""Profile claim use cases."""

from typing import Any

import logfire
from pydantic import BaseModel, Field

from pulse.domain.service import ProfileService
from pulse.domain.value import ProfileClaimId, ProfileId, UserId

from ..base import BaseUseCase, parse_id
from .common import ClaimResponse, RejectionRequest, ReviewRequest


class SubmitClaimRequest(BaseModel):
    """Submit claim request."""

    profile_id: str  # UUID string
    user_id: str  # Authenticated claimant
    submitted_data: dict[str, Any] = Field(default_factory=dict)


class SubmitClaimUseCase(BaseUseCase):
    """Use case for claiming ownership of a profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: SubmitClaimRequest) -> ClaimResponse:
        """Submit a PENDING claim.

        Raises:
            NotFoundError: PROFILE_NOT_FOUND, USER_NOT_FOUND
            BusinessRuleViolationError: CATEGORY_NOT_ALLOWED
            ConflictError: ALREADY_CLAIMED
        """
        claim = await self.profile_service.submit_claim(
            parse_id(request.user_id, UserId),
            parse_id(request.profile_id, ProfileId),
            request.submitted_data,
        )
        return ClaimResponse.from_claim(claim)


class ApproveClaimUseCase(BaseUseCase):
    """Use case for approving a claim.

    The profile becomes claimed by the claimant and every other pending
    claim on it is rejected in the same transaction.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize approve claim use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: ReviewRequest) -> ClaimResponse:
        claim_id = parse_id(request.target_id, ProfileClaimId)
        with logfire.span("approve_claim.execute", claim_id=str(claim_id)):
            claim = await self.profile_service.approve_claim(
                parse_id(request.admin_id, UserId), claim_id
            )
            return ClaimResponse.from_claim(claim)


class RejectClaimUseCase(BaseUseCase):
    """Use case for rejecting a claim with a reason."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: RejectionRequest) -> ClaimResponse:
        claim = await self.profile_service.reject_claim(
            parse_id(request.admin_id, UserId),
            parse_id(request.target_id, ProfileClaimId),
            request.reason,
        )
        return ClaimResponse.from_claim(claim)
