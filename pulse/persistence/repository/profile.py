"""PostgreSQL implementation of profile, claim and request repositories."""

from typing import Optional, Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

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
from pulse.persistence.mappers import (
    profile_claim_to_dict,
    profile_request_to_dict,
    profile_to_dict,
    row_to_profile,
    row_to_profile_claim,
    row_to_profile_request,
)
from pulse.persistence.tables import (
    profile_claims_table,
    profile_requests_table,
    profiles_table,
)


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == profile_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_id_for_update(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID and lock its row."""
        stmt = (
            select(profiles_table)
            .where(profiles_table.c.id == profile_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_ids(self, profile_ids: Sequence[ProfileId]) -> list[Profile]:
        """Find profiles by IDs; unknown IDs are skipped."""
        if not profile_ids:
            return []
        stmt = select(profiles_table).where(profiles_table.c.id.in_(list(profile_ids)))
        result = await self.session.execute(stmt)
        return [row_to_profile(dict(row)) for row in result.mappings().all()]

    async def find_by_category_and_name(
        self, category_id: CategoryId, name: str
    ) -> Optional[Profile]:
        """Find a profile by its (category, name) key."""
        stmt = select(profiles_table).where(
            profiles_table.c.category_id == category_id,
            profiles_table.c.name == name,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Raises:
            IntegrityError: If the (category, name) key is taken
        """
        profile_dict = profile_to_dict(profile)

        existing = await self.find_by_id(profile.id)
        if existing:
            stmt = (
                update(profiles_table)
                .where(profiles_table.c.id == profile.id)
                .values(**profile_dict)
            )
        else:
            stmt = insert(profiles_table).values(**profile_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return profile


class PostgresProfileClaimRepository(ProfileClaimRepository):
    """PostgreSQL implementation of ProfileClaimRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, claim_id: ProfileClaimId) -> Optional[ProfileClaim]:
        """Find a claim by ID."""
        stmt = select(profile_claims_table).where(
            profile_claims_table.c.id == claim_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile_claim(dict(row)) if row else None

    async def find_by_id_for_update(
        self, claim_id: ProfileClaimId
    ) -> Optional[ProfileClaim]:
        """Find a claim by ID and lock its row."""
        stmt = (
            select(profile_claims_table)
            .where(profile_claims_table.c.id == claim_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile_claim(dict(row)) if row else None

    async def find_pending_by_profile(
        self, profile_id: ProfileId
    ) -> list[ProfileClaim]:
        """Find every PENDING claim on a profile."""
        stmt = select(profile_claims_table).where(
            profile_claims_table.c.profile_id == profile_id,
            profile_claims_table.c.status == ReviewStatus.PENDING.value,
        )
        result = await self.session.execute(stmt)
        return [row_to_profile_claim(dict(row)) for row in result.mappings().all()]

    async def save(self, claim: ProfileClaim) -> ProfileClaim:
        """Save a claim (create or update)."""
        claim_dict = profile_claim_to_dict(claim)

        existing = await self.find_by_id(claim.id)
        if existing:
            stmt = (
                update(profile_claims_table)
                .where(profile_claims_table.c.id == claim.id)
                .values(**claim_dict)
            )
        else:
            stmt = insert(profile_claims_table).values(**claim_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return claim


class PostgresProfileRequestRepository(ProfileRequestRepository):
    """PostgreSQL implementation of ProfileRequestRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, request_id: ProfileRequestId
    ) -> Optional[ProfileRequest]:
        """Find a request by ID."""
        stmt = select(profile_requests_table).where(
            profile_requests_table.c.id == request_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile_request(dict(row)) if row else None

    async def find_by_id_for_update(
        self, request_id: ProfileRequestId
    ) -> Optional[ProfileRequest]:
        """Find a request by ID and lock its row."""
        stmt = (
            select(profile_requests_table)
            .where(profile_requests_table.c.id == request_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile_request(dict(row)) if row else None

    async def save(self, request: ProfileRequest) -> ProfileRequest:
        """Save a request (create or update)."""
        request_dict = profile_request_to_dict(request)

        existing = await self.find_by_id(request.id)
        if existing:
            stmt = (
                update(profile_requests_table)
                .where(profile_requests_table.c.id == request.id)
                .values(**request_dict)
            )
        else:
            stmt = insert(profile_requests_table).values(**request_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return request
