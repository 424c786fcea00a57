"""Unit tests for submit and get PSI use cases."""

import pytest

from pulse.application.usecase.psi import (
    GetProfilePsiRequest,
    GetProfilePsiUseCase,
    SubmitPsiVoteRequest,
    SubmitPsiVoteUseCase,
)
from pulse.domain.value import PsiRatings
from tests.conftest import make_profile, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

RATINGS = PsiRatings(
    trust_integrity=70,
    performance_delivery=70,
    responsiveness=70,
    leadership_ability=70,
)


class TestSubmitPsiVoteUseCase:
    """Tests for SubmitPsiVoteUseCase and GetProfilePsiUseCase."""

    @pytest.mark.asyncio
    async def test_submit_then_read(self, unit_env):
        # Arrange
        user = await make_user(unit_env, verified=True)
        profile = await make_profile(unit_env)
        submit = await unit_env.get(SubmitPsiVoteUseCase)
        get_psi = await unit_env.get(GetProfilePsiUseCase)

        # Act
        submitted = await submit.execute(
            SubmitPsiVoteRequest(
                profile_id=str(profile.id), user_id=str(user.id), ratings=RATINGS
            )
        )
        fetched = await get_psi.execute(
            GetProfilePsiRequest(profile_id=str(profile.id))
        )

        # Assert
        assert submitted == fetched
        assert fetched.overall_score == 40
        assert fetched.vote_count == 1
