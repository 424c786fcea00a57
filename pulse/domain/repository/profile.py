"""Profile, claim and request repository interfaces."""

from abc import ABC, abstractmethod
from typing import Sequence

from pulse.domain.model.profile import Profile, ProfileClaim, ProfileRequest
from pulse.domain.value import (
    CategoryId,
    ProfileClaimId,
    ProfileId,
    ProfileRequestId,
)


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Profile | None:
        """Find a profile by ID."""
        pass

    @abstractmethod
    async def find_by_id_for_update(self, profile_id: ProfileId) -> Profile | None:
        """Find a profile by ID and lock its row for the current transaction."""
        pass

    @abstractmethod
    async def find_by_ids(self, profile_ids: Sequence[ProfileId]) -> list[Profile]:
        """Find several profiles at once."""
        pass

    @abstractmethod
    async def find_by_category_and_name(
        self, category_id: CategoryId, name: str
    ) -> Profile | None:
        """Find a profile by its (category, name) natural key."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Raises:
            IntegrityError: If (category, name) is already taken
        """
        pass


class ProfileClaimRepository(ABC):
    """Repository for ProfileClaim entity."""

    @abstractmethod
    async def find_by_id(self, claim_id: ProfileClaimId) -> ProfileClaim | None:
        """Find a claim by ID."""
        pass

    @abstractmethod
    async def find_by_id_for_update(
        self, claim_id: ProfileClaimId
    ) -> ProfileClaim | None:
        """Find a claim by ID and lock its row for the current transaction."""
        pass

    @abstractmethod
    async def find_pending_by_profile(
        self, profile_id: ProfileId
    ) -> list[ProfileClaim]:
        """Find every PENDING claim on a profile."""
        pass

    @abstractmethod
    async def save(self, claim: ProfileClaim) -> ProfileClaim:
        """Save a claim (create or update)."""
        pass


class ProfileRequestRepository(ABC):
    """Repository for ProfileRequest entity."""

    @abstractmethod
    async def find_by_id(self, request_id: ProfileRequestId) -> ProfileRequest | None:
        """Find a request by ID."""
        pass

    @abstractmethod
    async def find_by_id_for_update(
        self, request_id: ProfileRequestId
    ) -> ProfileRequest | None:
        """Find a request by ID and lock its row for the current transaction."""
        pass

    @abstractmethod
    async def save(self, request: ProfileRequest) -> ProfileRequest:
        """Save a request (create or update)."""
        pass
