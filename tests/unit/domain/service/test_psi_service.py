"""Unit tests for PsiService."""

from uuid import uuid4

import pytest

from pulse.domain.error import ErrorCode, NotFoundError
from pulse.domain.service import PsiService
from pulse.domain.service.psi_service import round_half_up
from pulse.domain.value import ProfileId, PsiRatings, UserId
from tests.conftest import make_profile, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _ratings(value: float) -> PsiRatings:
    return PsiRatings(
        trust_integrity=value,
        performance_delivery=value,
        responsiveness=value,
        leadership_ability=value,
    )


class TestRounding:
    """Tests for round_half_up."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.5, 1), (1.5, 2), (-0.5, 0), (-1.5, -1), (33.33, 33), (-33.5, -33)],
    )
    def test_halves_round_up(self, value, expected):
        assert round_half_up(value) == expected


class TestVoterWeight:
    """Tests for voter_weight."""

    @pytest.mark.asyncio
    async def test_verified_voter(self, unit_env):
        service = await unit_env.get(PsiService)
        user = await make_user(unit_env, verified=True)

        assert await service.voter_weight(user.id) == 1.0

    @pytest.mark.asyncio
    async def test_new_unverified_voter(self, unit_env):
        service = await unit_env.get(PsiService)
        user = await make_user(unit_env)

        assert await service.voter_weight(user.id) == 0.5

    @pytest.mark.asyncio
    async def test_established_unverified_voter(self, unit_env):
        """Unverified voters who rated five profiles are no longer new."""
        # Arrange
        service = await unit_env.get(PsiService)
        user = await make_user(unit_env)
        for index in range(5):
            profile = await make_profile(unit_env, name=f"Profile {index}")
            await service.submit_vote(user.id, profile.id, _ratings(60))

        # Act
        weight = await service.voter_weight(user.id)

        # Assert
        assert weight == 0.8

    @pytest.mark.asyncio
    async def test_unknown_voter(self, unit_env):
        service = await unit_env.get(PsiService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.voter_weight(UserId(uuid4()))

        assert exc_info.value.code == ErrorCode.USER_NOT_FOUND


class TestSubmitVote:
    """Tests for submit_vote and get_profile_psi."""

    @pytest.mark.asyncio
    async def test_no_votes_is_neutral(self, unit_env):
        service = await unit_env.get(PsiService)

        score = await service.get_profile_psi(ProfileId(uuid4()))

        assert score.vote_count == 0
        assert score.overall_score == 0
        assert score.parameters == PsiRatings.neutral()

    @pytest.mark.asyncio
    async def test_single_vote(self, unit_env):
        service = await unit_env.get(PsiService)
        user = await make_user(unit_env, verified=True)
        profile = await make_profile(unit_env)

        score = await service.submit_vote(user.id, profile.id, _ratings(80))

        assert score.vote_count == 1
        assert score.overall_score == 60
        assert score.parameters == _ratings(80)

    @pytest.mark.asyncio
    async def test_weighted_mean(self, unit_env):
        """A verified 100 and a new unverified 0 average to 66.67, scoring 33."""
        service = await unit_env.get(PsiService)
        verified = await make_user(unit_env, verified=True)
        newcomer = await make_user(unit_env)
        profile = await make_profile(unit_env)

        await service.submit_vote(verified.id, profile.id, _ratings(100))
        score = await service.submit_vote(newcomer.id, profile.id, _ratings(0))

        assert score.vote_count == 2
        assert score.parameters.trust_integrity == pytest.approx(100 / 1.5)
        assert score.overall_score == 33

    @pytest.mark.asyncio
    async def test_ratings_are_clamped(self, unit_env):
        service = await unit_env.get(PsiService)
        user = await make_user(unit_env, verified=True)
        profile = await make_profile(unit_env)

        score = await service.submit_vote(
            user.id,
            profile.id,
            PsiRatings(
                trust_integrity=140,
                performance_delivery=-20,
                responsiveness=100,
                leadership_ability=0,
            ),
        )

        assert score.parameters.trust_integrity == 100
        assert score.parameters.performance_delivery == 0
        assert score.overall_score == 0

    @pytest.mark.asyncio
    async def test_revote_replaces(self, unit_env):
        """A second vote by the same voter replaces the first."""
        service = await unit_env.get(PsiService)
        user = await make_user(unit_env, verified=True)
        profile = await make_profile(unit_env)
        await service.submit_vote(user.id, profile.id, _ratings(90))

        score = await service.submit_vote(user.id, profile.id, _ratings(25))

        assert score.vote_count == 1
        assert score.overall_score == -50

    @pytest.mark.asyncio
    async def test_unknown_profile_checked_first(self, unit_env):
        service = await unit_env.get(PsiService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.submit_vote(UserId(uuid4()), ProfileId(uuid4()), _ratings(50))

        assert exc_info.value.code == ErrorCode.PROFILE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_unknown_voter(self, unit_env):
        service = await unit_env.get(PsiService)
        profile = await make_profile(unit_env)

        with pytest.raises(NotFoundError) as exc_info:
            await service.submit_vote(UserId(uuid4()), profile.id, _ratings(50))

        assert exc_info.value.code == ErrorCode.USER_NOT_FOUND


class TestTrending:
    """Tests for list_trending."""

    @pytest.mark.asyncio
    async def test_empty(self, unit_env):
        service = await unit_env.get(PsiService)

        assert await service.list_trending() == []

    @pytest.mark.asyncio
    async def test_ranked_and_limited(self, unit_env):
        # Arrange
        service = await unit_env.get(PsiService)
        user = await make_user(unit_env, verified=True)
        low = await make_profile(unit_env, name="Low")
        high = await make_profile(unit_env, name="High")
        mid = await make_profile(unit_env, name="Mid")
        await service.submit_vote(user.id, low.id, _ratings(10))
        await service.submit_vote(user.id, high.id, _ratings(95))
        await service.submit_vote(user.id, mid.id, _ratings(50))

        # Act
        trending = await service.list_trending(limit=2)

        # Assert
        assert [entry.profile_id for entry in trending] == [high.id, mid.id]
        assert trending[0].profile.name == "High"
        assert trending[0].profile.category_name == "Elections"
        assert trending[0].overall_score == 90
