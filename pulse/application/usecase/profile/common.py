"""Shared profile DTOs."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from pulse.domain.model import Profile, ProfileClaim, ProfileRequest
from pulse.domain.value import ProfileStatus, ReviewStatus


class ProfileResponse(BaseModel):
    """Public profile."""

    profile_id: str
    name: str
    category_id: str
    status: ProfileStatus
    is_claimed: bool
    claimed_by_user_id: str | None
    created_at: datetime

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            profile_id=str(profile.id),
            name=profile.name,
            category_id=str(profile.category_id),
            status=profile.status,
            is_claimed=profile.is_claimed,
            claimed_by_user_id=(
                str(profile.claimed_by_user_id) if profile.claimed_by_user_id else None
            ),
            created_at=profile.created_at,
        )


class ClaimResponse(BaseModel):
    """Profile claim and its review state."""

    claim_id: str
    profile_id: str
    user_id: str
    status: ReviewStatus
    submitted_data: dict[str, Any]
    reviewed_at: datetime | None
    review_reason: str | None
    created_at: datetime

    @classmethod
    def from_claim(cls, claim: ProfileClaim) -> "ClaimResponse":
        return cls(
            claim_id=str(claim.id),
            profile_id=str(claim.profile_id),
            user_id=str(claim.user_id),
            status=claim.status,
            submitted_data=claim.submitted_data,
            reviewed_at=claim.reviewed_at,
            review_reason=claim.review_reason,
            created_at=claim.created_at,
        )


class ProfileRequestResponse(BaseModel):
    """Request for a new profile and its review state."""

    request_id: str
    category_id: str
    requested_name: str
    user_id: str
    status: ReviewStatus
    submitted_data: dict[str, Any]
    approved_profile_id: str | None
    reviewed_at: datetime | None
    review_reason: str | None
    created_at: datetime

    @classmethod
    def from_request(cls, request: ProfileRequest) -> "ProfileRequestResponse":
        return cls(
            request_id=str(request.id),
            category_id=str(request.category_id),
            requested_name=request.requested_name,
            user_id=str(request.user_id),
            status=request.status,
            submitted_data=request.submitted_data,
            approved_profile_id=(
                str(request.approved_profile_id)
                if request.approved_profile_id
                else None
            ),
            reviewed_at=request.reviewed_at,
            review_reason=request.review_reason,
            created_at=request.created_at,
        )


class ReviewRequest(BaseModel):
    """Admin decision on a claim or request."""

    target_id: str  # Claim or request id
    admin_id: str  # Authenticated admin


class RejectionRequest(ReviewRequest):
    """Admin rejection, which must say why."""

    reason: str = Field(min_length=1, max_length=1000)
