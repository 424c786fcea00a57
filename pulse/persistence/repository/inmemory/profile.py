"""In-memory profile, claim and request repositories for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from pulse.domain.model import Profile, ProfileClaim, ProfileRequest
from pulse.domain.repository import (
    ProfileClaimRepository,
    ProfileRepository,
    ProfileRequestRepository,
)
from pulse.domain.value import (
    CategoryId,
    ProfileClaimId,
    ProfileId,
    ProfileRequestId,
    ReviewStatus,
)

from .base import InMemoryRepository


class InMemoryProfileRepository(InMemoryRepository, ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[ProfileId, Profile] = {}

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        return self._profiles.get(profile_id)

    async def find_by_id_for_update(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID. Locking is done by the transaction manager."""
        return self._profiles.get(profile_id)

    async def find_by_ids(self, profile_ids: Sequence[ProfileId]) -> list[Profile]:
        """Find profiles by IDs; unknown IDs are skipped."""
        return [self._profiles[pid] for pid in profile_ids if pid in self._profiles]

    async def find_by_category_and_name(
        self, category_id: CategoryId, name: str
    ) -> Optional[Profile]:
        """Find a profile by its (category, name) key."""
        for profile in self._profiles.values():
            if profile.category_id == category_id and profile.name == name:
                return profile
        return None

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Raises:
            IntegrityError: If the (category, name) key is taken
        """
        existing = await self.find_by_category_and_name(
            profile.category_id, profile.name
        )
        if existing and existing.id != profile.id:
            raise IntegrityError("Duplicate profile name", None, Exception())

        self._profiles[profile.id] = profile
        return profile


class InMemoryProfileClaimRepository(InMemoryRepository, ProfileClaimRepository):
    """In-memory implementation of ProfileClaimRepository for testing."""

    def __init__(self) -> None:
        self._claims: dict[ProfileClaimId, ProfileClaim] = {}

    async def find_by_id(self, claim_id: ProfileClaimId) -> Optional[ProfileClaim]:
        """Find a claim by ID."""
        return self._claims.get(claim_id)

    async def find_by_id_for_update(
        self, claim_id: ProfileClaimId
    ) -> Optional[ProfileClaim]:
        """Find a claim by ID. Locking is done by the transaction manager."""
        return self._claims.get(claim_id)

    async def find_pending_by_profile(
        self, profile_id: ProfileId
    ) -> list[ProfileClaim]:
        """Find every PENDING claim on a profile."""
        return [
            claim
            for claim in self._claims.values()
            if claim.profile_id == profile_id and claim.status == ReviewStatus.PENDING
        ]

    async def save(self, claim: ProfileClaim) -> ProfileClaim:
        """Save a claim (create or update)."""
        self._claims[claim.id] = claim
        return claim


class InMemoryProfileRequestRepository(InMemoryRepository, ProfileRequestRepository):
    """In-memory implementation of ProfileRequestRepository for testing."""

    def __init__(self) -> None:
        self._requests: dict[ProfileRequestId, ProfileRequest] = {}

    async def find_by_id(
        self, request_id: ProfileRequestId
    ) -> Optional[ProfileRequest]:
        """Find a request by ID."""
        return self._requests.get(request_id)

    async def find_by_id_for_update(
        self, request_id: ProfileRequestId
    ) -> Optional[ProfileRequest]:
        """Find a request by ID. Locking is done by the transaction manager."""
        return self._requests.get(request_id)

    async def save(self, request: ProfileRequest) -> ProfileRequest:
        """Save a request (create or update)."""
        self._requests[request.id] = request
        return request
