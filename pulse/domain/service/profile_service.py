"""Profile claim and request review domain service."""

from typing import Any
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from pulse.domain.error import DomainError, ErrorCode
from pulse.domain.model.category import Category
from pulse.domain.model.profile import Profile, ProfileClaim, ProfileRequest
from pulse.domain.repository import (
    CategoryRepository,
    ProfileClaimRepository,
    ProfileRepository,
    ProfileRequestRepository,
    TransactionManager,
    UserRepository,
)
from pulse.domain.value import (
    AdminCurated,
    CategoryDomain,
    CategoryId,
    ProfileClaimId,
    ProfileId,
    ProfileRequestId,
    ProfileStatus,
    ReviewStatus,
    UserId,
    YesNo,
)

from .base import Service
from .clock import Clock
from .inheritance_service import InheritanceService

RIVAL_CLAIM_REASON = "Profile already claimed"


class ProfileService(Service):
    """Domain service for profiles and their review workflows.

    Approving a claim marks the profile claimed and rejects every rival
    pending claim; approving a request creates the profile. Both happen in
    one transaction with the contended rows locked, and the preconditions
    are re-checked under the lock.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        profile_claim_repository: ProfileClaimRepository,
        profile_request_repository: ProfileRequestRepository,
        category_repository: CategoryRepository,
        user_repository: UserRepository,
        inheritance_service: InheritanceService,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            profile_claim_repository: Claim repository
            profile_request_repository: Request repository
            category_repository: Category repository
            user_repository: User repository
            inheritance_service: Inheritance resolver
            transaction_manager: Transaction boundary
            clock: Time source
        """
        self.profile_repository = profile_repository
        self.profile_claim_repository = profile_claim_repository
        self.profile_request_repository = profile_request_repository
        self.category_repository = category_repository
        self.user_repository = user_repository
        self.inheritance_service = inheritance_service
        self.transaction_manager = transaction_manager
        self.clock = clock

    async def create_profile(
        self,
        name: str,
        category_id: CategoryId,
        status: ProfileStatus = ProfileStatus.ACTIVE,
    ) -> Profile:
        """Create a profile directly (admin).

        Raises:
            BusinessRuleViolationError: INVALID_PROFILE_CATEGORY
            ConflictError: PROFILE_ALREADY_EXISTS
        """
        with logfire.span(
            "profile_service.create_profile", name=name, category_id=str(category_id)
        ):
            await self._get_profile_category(category_id)
            if await self.profile_repository.find_by_category_and_name(category_id, name):
                raise DomainError.from_code(ErrorCode.PROFILE_ALREADY_EXISTS)

            profile = Profile(
                id=ProfileId(uuid4()),
                name=name,
                category_id=category_id,
                status=status,
                created_at=self.clock.now(),
            )
            try:
                async with self.transaction_manager.transaction():
                    saved = await self.profile_repository.save(profile)
            except IntegrityError:
                raise DomainError.from_code(ErrorCode.PROFILE_ALREADY_EXISTS)
            logfire.info("Profile created", profile_id=str(saved.id))
            return saved

    async def submit_claim(
        self,
        user_id: UserId,
        profile_id: ProfileId,
        submitted_data: dict[str, Any] | None = None,
    ) -> ProfileClaim:
        """Submit a claim to own a profile.

        Args:
            user_id: Claimant
            profile_id: Profile to claim
            submitted_data: Supporting answers

        Returns:
            The PENDING claim

        Raises:
            NotFoundError: USER_NOT_FOUND, PROFILE_NOT_FOUND
            ConflictError: ALREADY_CLAIMED
            BusinessRuleViolationError: CATEGORY_NOT_ALLOWED
        """
        with logfire.span(
            "profile_service.submit_claim",
            user_id=str(user_id),
            profile_id=str(profile_id),
        ):
            await self._ensure_user(user_id)

            profile = await self.profile_repository.find_by_id(profile_id)
            if profile is None or profile.status != ProfileStatus.ACTIVE:
                raise DomainError.from_code(ErrorCode.PROFILE_NOT_FOUND)
            if profile.is_claimed:
                logfire.warn("Claim on claimed profile", profile_id=str(profile_id))
                raise DomainError.from_code(ErrorCode.ALREADY_CLAIMED)

            effective = await self.inheritance_service.resolve_effective(
                profile.category_id, CategoryDomain.PROFILE
            )
            if (
                effective is None
                or not effective.is_active
                or effective.claimable != YesNo.YES
            ):
                raise DomainError.from_code(ErrorCode.CATEGORY_NOT_ALLOWED)

            claim = ProfileClaim(
                id=ProfileClaimId(uuid4()),
                profile_id=profile_id,
                user_id=user_id,
                status=ReviewStatus.PENDING,
                submitted_data=submitted_data or {},
                created_at=self.clock.now(),
            )
            saved = await self.profile_claim_repository.save(claim)
            logfire.info("Claim submitted", claim_id=str(saved.id))
            return saved

    async def approve_claim(
        self, admin_id: UserId, claim_id: ProfileClaimId
    ) -> ProfileClaim:
        """Approve a claim and reject its rivals, atomically.

        The profile row is locked before the claim rows, so rival approvals
        serialise on the profile and the loser sees ALREADY_CLAIMED.

        Args:
            admin_id: Reviewing admin
            claim_id: Claim to approve

        Returns:
            The APPROVED claim

        Raises:
            NotFoundError: CLAIM_NOT_FOUND, PROFILE_NOT_FOUND
            BusinessRuleViolationError: INVALID_STATUS unless PENDING
            ConflictError: ALREADY_CLAIMED
        """
        with logfire.span(
            "profile_service.approve_claim",
            admin_id=str(admin_id),
            claim_id=str(claim_id),
        ):
            async with self.transaction_manager.transaction():
                claim = await self.profile_claim_repository.find_by_id(claim_id)
                if claim is None:
                    raise DomainError.from_code(ErrorCode.CLAIM_NOT_FOUND)

                profile = await self.profile_repository.find_by_id_for_update(
                    claim.profile_id
                )
                claim = await self.profile_claim_repository.find_by_id_for_update(
                    claim_id
                )
                if claim is None:
                    raise DomainError.from_code(ErrorCode.CLAIM_NOT_FOUND)
                if claim.status != ReviewStatus.PENDING:
                    raise DomainError.from_code(ErrorCode.INVALID_STATUS)
                if profile is None:
                    raise DomainError.from_code(ErrorCode.PROFILE_NOT_FOUND)
                if profile.is_claimed:
                    logfire.warn(
                        "Profile claimed by a rival", profile_id=str(profile.id)
                    )
                    raise DomainError.from_code(ErrorCode.ALREADY_CLAIMED)

                now = self.clock.now()
                await self.profile_repository.save(
                    profile.model_copy(
                        update={"is_claimed": True, "claimed_by_user_id": claim.user_id}
                    )
                )

                rivals = await self.profile_claim_repository.find_pending_by_profile(
                    profile.id
                )
                for rival in rivals:
                    if rival.id == claim.id:
                        continue
                    await self.profile_claim_repository.save(
                        rival.model_copy(
                            update={
                                "status": ReviewStatus.REJECTED,
                                "reviewed_at": now,
                                "reviewed_by_admin_id": admin_id,
                                "review_reason": RIVAL_CLAIM_REASON,
                            }
                        )
                    )

                approved = await self.profile_claim_repository.save(
                    claim.model_copy(
                        update={
                            "status": ReviewStatus.APPROVED,
                            "reviewed_at": now,
                            "reviewed_by_admin_id": admin_id,
                            "review_reason": None,
                        }
                    )
                )

            logfire.info(
                "Claim approved",
                claim_id=str(claim_id),
                profile_id=str(approved.profile_id),
                rivals_rejected=sum(1 for r in rivals if r.id != claim_id),
            )
            return approved

    async def reject_claim(
        self, admin_id: UserId, claim_id: ProfileClaimId, reason: str
    ) -> ProfileClaim:
        """Reject a pending claim.

        Raises:
            NotFoundError: CLAIM_NOT_FOUND
            BusinessRuleViolationError: INVALID_STATUS unless PENDING
        """
        with logfire.span(
            "profile_service.reject_claim",
            admin_id=str(admin_id),
            claim_id=str(claim_id),
        ):
            async with self.transaction_manager.transaction():
                claim = await self.profile_claim_repository.find_by_id_for_update(
                    claim_id
                )
                if claim is None:
                    raise DomainError.from_code(ErrorCode.CLAIM_NOT_FOUND)
                if claim.status != ReviewStatus.PENDING:
                    raise DomainError.from_code(ErrorCode.INVALID_STATUS)

                rejected = await self.profile_claim_repository.save(
                    claim.model_copy(
                        update={
                            "status": ReviewStatus.REJECTED,
                            "reviewed_at": self.clock.now(),
                            "reviewed_by_admin_id": admin_id,
                            "review_reason": reason,
                        }
                    )
                )
            logfire.info("Claim rejected", claim_id=str(claim_id))
            return rejected

    async def submit_request(
        self,
        user_id: UserId,
        category_id: CategoryId,
        requested_name: str,
        submitted_data: dict[str, Any] | None = None,
    ) -> ProfileRequest:
        """Request creation of a new profile.

        Raises:
            NotFoundError: USER_NOT_FOUND
            BusinessRuleViolationError: INVALID_PROFILE_CATEGORY, CATEGORY_NOT_ALLOWED
            ConflictError: PROFILE_ALREADY_EXISTS
        """
        with logfire.span(
            "profile_service.submit_request",
            user_id=str(user_id),
            category_id=str(category_id),
        ):
            await self._ensure_user(user_id)
            await self._get_profile_category(category_id)

            effective = await self.inheritance_service.resolve_effective(
                category_id, CategoryDomain.PROFILE
            )
            if (
                effective is None
                or not effective.is_active
                or effective.request_allowed != YesNo.YES
                or effective.admin_curated == AdminCurated.FULL
            ):
                raise DomainError.from_code(ErrorCode.CATEGORY_NOT_ALLOWED)

            if await self.profile_repository.find_by_category_and_name(
                category_id, requested_name
            ):
                raise DomainError.from_code(ErrorCode.PROFILE_ALREADY_EXISTS)

            request = ProfileRequest(
                id=ProfileRequestId(uuid4()),
                category_id=category_id,
                requested_name=requested_name,
                user_id=user_id,
                status=ReviewStatus.PENDING,
                submitted_data=submitted_data or {},
                created_at=self.clock.now(),
            )
            saved = await self.profile_request_repository.save(request)
            logfire.info("Profile request submitted", request_id=str(saved.id))
            return saved

    async def approve_request(
        self, admin_id: UserId, request_id: ProfileRequestId
    ) -> ProfileRequest:
        """Approve a request, creating its ACTIVE profile atomically.

        Args:
            admin_id: Reviewing admin
            request_id: Request to approve

        Returns:
            The APPROVED request, linked to the created profile

        Raises:
            NotFoundError: REQUEST_NOT_FOUND
            BusinessRuleViolationError: INVALID_STATUS unless PENDING,
                INVALID_PROFILE_CATEGORY
            ConflictError: PROFILE_ALREADY_EXISTS
        """
        with logfire.span(
            "profile_service.approve_request",
            admin_id=str(admin_id),
            request_id=str(request_id),
        ):
            try:
                async with self.transaction_manager.transaction():
                    request = await self.profile_request_repository.find_by_id_for_update(
                        request_id
                    )
                    if request is None:
                        raise DomainError.from_code(ErrorCode.REQUEST_NOT_FOUND)
                    if request.status != ReviewStatus.PENDING:
                        raise DomainError.from_code(ErrorCode.INVALID_STATUS)

                    await self._get_profile_category(request.category_id)
                    if await self.profile_repository.find_by_category_and_name(
                        request.category_id, request.requested_name
                    ):
                        raise DomainError.from_code(ErrorCode.PROFILE_ALREADY_EXISTS)

                    now = self.clock.now()
                    profile = await self.profile_repository.save(
                        Profile(
                            id=ProfileId(uuid4()),
                            name=request.requested_name,
                            category_id=request.category_id,
                            status=ProfileStatus.ACTIVE,
                            created_at=now,
                        )
                    )
                    approved = await self.profile_request_repository.save(
                        request.model_copy(
                            update={
                                "status": ReviewStatus.APPROVED,
                                "approved_profile_id": profile.id,
                                "reviewed_at": now,
                                "reviewed_by_admin_id": admin_id,
                                "review_reason": None,
                            }
                        )
                    )
            except IntegrityError:
                logfire.warn("Profile created concurrently", request_id=str(request_id))
                raise DomainError.from_code(ErrorCode.PROFILE_ALREADY_EXISTS)

            logfire.info(
                "Profile request approved",
                request_id=str(request_id),
                profile_id=str(profile.id),
            )
            return approved

    async def reject_request(
        self, admin_id: UserId, request_id: ProfileRequestId, reason: str
    ) -> ProfileRequest:
        """Reject a pending request.

        Raises:
            NotFoundError: REQUEST_NOT_FOUND
            BusinessRuleViolationError: INVALID_STATUS unless PENDING
        """
        with logfire.span(
            "profile_service.reject_request",
            admin_id=str(admin_id),
            request_id=str(request_id),
        ):
            async with self.transaction_manager.transaction():
                request = await self.profile_request_repository.find_by_id_for_update(
                    request_id
                )
                if request is None:
                    raise DomainError.from_code(ErrorCode.REQUEST_NOT_FOUND)
                if request.status != ReviewStatus.PENDING:
                    raise DomainError.from_code(ErrorCode.INVALID_STATUS)

                rejected = await self.profile_request_repository.save(
                    request.model_copy(
                        update={
                            "status": ReviewStatus.REJECTED,
                            "reviewed_at": self.clock.now(),
                            "reviewed_by_admin_id": admin_id,
                            "review_reason": reason,
                        }
                    )
                )
            logfire.info("Profile request rejected", request_id=str(request_id))
            return rejected

    async def _ensure_user(self, user_id: UserId) -> None:
        if await self.user_repository.find_by_id(user_id) is None:
            raise DomainError.from_code(ErrorCode.USER_NOT_FOUND)

    async def _get_profile_category(self, category_id: CategoryId) -> Category:
        category = await self.category_repository.find_by_id(category_id)
        if (
            category is None
            or category.domain != CategoryDomain.PROFILE
            or category.is_parent
        ):
            raise DomainError.from_code(ErrorCode.INVALID_PROFILE_CATEGORY)
        return category
