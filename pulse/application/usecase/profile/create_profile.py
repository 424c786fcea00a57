"""Create profile use case."""

from pydantic import BaseModel, Field

from pulse.domain.service import ProfileService
from pulse.domain.value import CategoryId, ProfileStatus

from ..base import BaseUseCase, parse_id
from .common import ProfileResponse


class CreateProfileRequest(BaseModel):
    """Create profile request."""

    name: str = Field(min_length=1, max_length=200)
    category_id: str  # UUID string
    status: ProfileStatus = ProfileStatus.ACTIVE


class CreateProfileUseCase(BaseUseCase):
    """Use case for an admin creating a profile directly."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: CreateProfileRequest) -> ProfileResponse:
        """Create the profile.

        Raises:
            BusinessRuleViolationError: INVALID_PROFILE_CATEGORY
            ConflictError: PROFILE_ALREADY_EXISTS
        """
        profile = await self.profile_service.create_profile(
            request.name, parse_id(request.category_id, CategoryId), request.status
        )
        return ProfileResponse.from_profile(profile)
