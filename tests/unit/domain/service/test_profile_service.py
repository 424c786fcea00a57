"""Unit tests for ProfileService."""

from uuid import uuid4

import pytest

from pulse.domain.error import (
    BusinessRuleViolationError,
    ConflictError,
    ErrorCode,
    NotFoundError,
)
from pulse.domain.repository import ProfileRepository, ProfileRequestRepository
from pulse.domain.service import ProfileService
from pulse.domain.service.profile_service import RIVAL_CLAIM_REASON
from pulse.domain.value import (
    AdminCurated,
    CategoryDomain,
    ProfileClaimId,
    ProfileStatus,
    ReviewStatus,
    UserId,
    UserRole,
    YesNo,
)
from tests.conftest import (
    make_child_category,
    make_parent_category,
    make_poll_category,
    make_profile,
    make_user,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _profile_category(env, **parent_defaults):
    parent = await make_parent_category(
        env, domain=CategoryDomain.PROFILE, name="Public figures", **parent_defaults
    )
    return await make_child_category(env, parent, name="Athletes")


class TestCreateProfile:
    """Tests for create_profile."""

    @pytest.mark.asyncio
    async def test_create(self, unit_env):
        service = await unit_env.get(ProfileService)
        category = await _profile_category(unit_env)

        profile = await service.create_profile("Jane Doe", category.id)

        assert profile.status == ProfileStatus.ACTIVE
        assert profile.is_claimed is False

    @pytest.mark.asyncio
    async def test_duplicate_name_in_category(self, unit_env):
        service = await unit_env.get(ProfileService)
        category = await _profile_category(unit_env)
        await service.create_profile("Jane Doe", category.id)

        with pytest.raises(ConflictError) as exc_info:
            await service.create_profile("Jane Doe", category.id)

        assert exc_info.value.code == ErrorCode.PROFILE_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_poll_category_is_invalid(self, unit_env):
        service = await unit_env.get(ProfileService)
        category = await make_poll_category(unit_env)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.create_profile("Jane Doe", category.id)

        assert exc_info.value.code == ErrorCode.INVALID_PROFILE_CATEGORY


class TestClaims:
    """Tests for the claim workflow."""

    @pytest.mark.asyncio
    async def test_submit_claim(self, unit_env):
        service = await unit_env.get(ProfileService)
        user = await make_user(unit_env)
        profile = await make_profile(unit_env)

        claim = await service.submit_claim(user.id, profile.id, {"proof": "id.png"})

        assert claim.status == ReviewStatus.PENDING
        assert claim.submitted_data == {"proof": "id.png"}

    @pytest.mark.asyncio
    async def test_unclaimable_category(self, unit_env):
        service = await unit_env.get(ProfileService)
        user = await make_user(unit_env)
        category = await _profile_category(unit_env, claimable=YesNo.NO)
        profile = await make_profile(unit_env, category.id)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.submit_claim(user.id, profile.id)

        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_ALLOWED

    @pytest.mark.asyncio
    async def test_unknown_claimant(self, unit_env):
        service = await unit_env.get(ProfileService)
        profile = await make_profile(unit_env)

        with pytest.raises(NotFoundError) as exc_info:
            await service.submit_claim(UserId(uuid4()), profile.id)

        assert exc_info.value.code == ErrorCode.USER_NOT_FOUND

    @pytest.mark.asyncio
    async def test_approve_rejects_rivals(self, unit_env):
        """Approving one claim claims the profile and rejects the others."""
        # Arrange
        service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        admin = await make_user(unit_env, role=UserRole.ADMIN)
        profile = await make_profile(unit_env)
        winner = await service.submit_claim((await make_user(unit_env)).id, profile.id)
        rival = await service.submit_claim((await make_user(unit_env)).id, profile.id)

        # Act
        approved = await service.approve_claim(admin.id, winner.id)

        # Assert
        assert approved.status == ReviewStatus.APPROVED
        assert approved.reviewed_by_admin_id == admin.id
        claimed = await profile_repo.find_by_id(profile.id)
        assert claimed.is_claimed is True
        assert claimed.claimed_by_user_id == winner.user_id

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.approve_claim(admin.id, rival.id)
        assert exc_info.value.code == ErrorCode.INVALID_STATUS

    @pytest.mark.asyncio
    async def test_rival_rejection_reason(self, unit_env):
        service = await unit_env.get(ProfileService)
        admin = await make_user(unit_env, role=UserRole.ADMIN)
        profile = await make_profile(unit_env)
        winner = await service.submit_claim((await make_user(unit_env)).id, profile.id)
        rival = await service.submit_claim((await make_user(unit_env)).id, profile.id)
        await service.approve_claim(admin.id, winner.id)

        rejected = await service.profile_claim_repository.find_by_id(rival.id)

        assert rejected.status == ReviewStatus.REJECTED
        assert rejected.review_reason == RIVAL_CLAIM_REASON

    @pytest.mark.asyncio
    async def test_claim_on_claimed_profile(self, unit_env):
        service = await unit_env.get(ProfileService)
        admin = await make_user(unit_env, role=UserRole.ADMIN)
        profile = await make_profile(unit_env)
        claim = await service.submit_claim((await make_user(unit_env)).id, profile.id)
        await service.approve_claim(admin.id, claim.id)

        with pytest.raises(ConflictError) as exc_info:
            await service.submit_claim((await make_user(unit_env)).id, profile.id)

        assert exc_info.value.code == ErrorCode.ALREADY_CLAIMED

    @pytest.mark.asyncio
    async def test_reject_claim(self, unit_env):
        service = await unit_env.get(ProfileService)
        admin = await make_user(unit_env, role=UserRole.ADMIN)
        profile = await make_profile(unit_env)
        claim = await service.submit_claim((await make_user(unit_env)).id, profile.id)

        rejected = await service.reject_claim(admin.id, claim.id, "No proof")

        assert rejected.status == ReviewStatus.REJECTED
        assert rejected.review_reason == "No proof"
        with pytest.raises(BusinessRuleViolationError):
            await service.reject_claim(admin.id, claim.id, "Again")

    @pytest.mark.asyncio
    async def test_approve_missing_claim(self, unit_env):
        service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.approve_claim(UserId(uuid4()), ProfileClaimId(uuid4()))

        assert exc_info.value.code == ErrorCode.CLAIM_NOT_FOUND


class TestRequests:
    """Tests for the profile request workflow."""

    @pytest.mark.asyncio
    async def test_approve_creates_profile(self, unit_env):
        # Arrange
        service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        admin = await make_user(unit_env, role=UserRole.ADMIN)
        user = await make_user(unit_env)
        category = await _profile_category(unit_env)
        request = await service.submit_request(user.id, category.id, "New Person")

        # Act
        approved = await service.approve_request(admin.id, request.id)

        # Assert
        assert approved.status == ReviewStatus.APPROVED
        profile = await profile_repo.find_by_id(approved.approved_profile_id)
        assert profile.name == "New Person"
        assert profile.category_id == category.id
        assert profile.status == ProfileStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_fully_curated_category(self, unit_env):
        service = await unit_env.get(ProfileService)
        user = await make_user(unit_env)
        category = await _profile_category(
            unit_env, admin_curated=AdminCurated.FULL
        )

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.submit_request(user.id, category.id, "New Person")

        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_ALLOWED

    @pytest.mark.asyncio
    async def test_existing_name(self, unit_env):
        service = await unit_env.get(ProfileService)
        user = await make_user(unit_env)
        category = await _profile_category(unit_env)
        await make_profile(unit_env, category.id, name="Taken")

        with pytest.raises(ConflictError) as exc_info:
            await service.submit_request(user.id, category.id, "Taken")

        assert exc_info.value.code == ErrorCode.PROFILE_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_approve_after_name_taken_rolls_back(self, unit_env):
        """A request whose name was taken meanwhile stays PENDING."""
        service = await unit_env.get(ProfileService)
        request_repo = await unit_env.get(ProfileRequestRepository)
        admin = await make_user(unit_env, role=UserRole.ADMIN)
        user = await make_user(unit_env)
        category = await _profile_category(unit_env)
        request = await service.submit_request(user.id, category.id, "Contested")
        await service.create_profile("Contested", category.id)

        with pytest.raises(ConflictError):
            await service.approve_request(admin.id, request.id)

        stored = await request_repo.find_by_id(request.id)
        assert stored.status == ReviewStatus.PENDING

    @pytest.mark.asyncio
    async def test_reject_request(self, unit_env):
        service = await unit_env.get(ProfileService)
        admin = await make_user(unit_env, role=UserRole.ADMIN)
        user = await make_user(unit_env)
        category = await _profile_category(unit_env)
        request = await service.submit_request(user.id, category.id, "Someone")

        rejected = await service.reject_request(admin.id, request.id, "Duplicate")

        assert rejected.status == ReviewStatus.REJECTED
        assert rejected.reviewed_by_admin_id == admin.id
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await service.approve_request(admin.id, request.id)
        assert exc_info.value.code == ErrorCode.INVALID_STATUS
