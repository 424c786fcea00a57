"""Claimable public profiles and their review workflows."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from pulse.domain.model.common import DomainModel, utc_now
from pulse.domain.value import (
    CategoryId,
    ProfileClaimId,
    ProfileId,
    ProfileRequestId,
    ProfileStatus,
    ReviewStatus,
    UserId,
)


class Profile(DomainModel):
    """Public profile that users rate and may claim."""

    id: ProfileId
    name: str
    category_id: CategoryId
    status: ProfileStatus = ProfileStatus.ACTIVE
    is_claimed: bool = False
    claimed_by_user_id: Optional[UserId] = None
    created_at: datetime = Field(default_factory=utc_now)


class ProfileClaim(DomainModel):
    """A user's claim to own an existing profile.

    Approving one claim rejects every other pending claim on the same profile.
    """

    id: ProfileClaimId
    profile_id: ProfileId
    user_id: UserId
    status: ReviewStatus = ReviewStatus.PENDING
    submitted_data: dict[str, Any] = Field(default_factory=dict)
    reviewed_at: Optional[datetime] = None
    reviewed_by_admin_id: Optional[UserId] = None
    review_reason: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)


class ProfileRequest(DomainModel):
    """A user's request to create a new profile. Approval creates the profile."""

    id: ProfileRequestId
    category_id: CategoryId
    requested_name: str
    user_id: UserId
    status: ReviewStatus = ReviewStatus.PENDING
    submitted_data: dict[str, Any] = Field(default_factory=dict)
    approved_profile_id: Optional[ProfileId] = None
    reviewed_at: Optional[datetime] = None
    reviewed_by_admin_id: Optional[UserId] = None
    review_reason: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
