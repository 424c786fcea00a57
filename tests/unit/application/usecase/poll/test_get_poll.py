"""Unit tests for GetPollUseCase."""

import pytest

from pulse.application.usecase.poll import GetPollUseCase, PollIdRequest
from pulse.domain.error import ErrorCode, ValidationError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetPollUseCase:
    """Tests for GetPollUseCase."""

    @pytest.mark.asyncio
    async def test_get_poll_with_malformed_id(self, unit_env):
        """Malformed ids are rejected before any lookup."""
        use_case = await unit_env.get(GetPollUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(PollIdRequest(poll_id="nope"))

        assert exc_info.value.code == ErrorCode.INVALID_ID
