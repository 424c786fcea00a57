"""Unit tests for end and extend user poll use cases."""

from datetime import timedelta
from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from pulse.application.usecase.user_poll import (
    CreateUserPollRequest,
    CreateUserPollUseCase,
    EndUserPollRequest,
    EndUserPollUseCase,
    ExtendUserPollRequest,
    ExtendUserPollUseCase,
)
from pulse.domain.error import BusinessRuleViolationError, ErrorCode
from pulse.domain.service import Clock
from pulse.domain.value import StartMode, UserPollStatus, UserPollType
from tests.conftest import make_poll_category
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create(env, creator_id: str):
    use_case = await env.get(CreateUserPollUseCase)
    category = await make_poll_category(env)
    return await use_case.execute(
        CreateUserPollRequest(
            creator_id=creator_id,
            category_id=category.id,
            type=UserPollType.YES_NO,
            title="Pizza tonight?",
            options=["Yes", "No"],
            start_mode=StartMode.INSTANT,
        )
    )


class TestEndUserPollUseCase:
    """Tests for EndUserPollUseCase."""

    @pytest.mark.asyncio
    async def test_end(self, unit_env):
        creator_id = str(uuid4())
        created = await _create(unit_env, creator_id)
        end_poll = await unit_env.get(EndUserPollUseCase)

        response = await end_poll.execute(
            EndUserPollRequest(poll_id=created.poll_id, user_id=creator_id)
        )

        assert response.status == UserPollStatus.CLOSED


class TestExtendUserPollUseCase:
    """Tests for ExtendUserPollUseCase."""

    @pytest.mark.asyncio
    async def test_extend(self, unit_env):
        clock = await unit_env.get(Clock)
        creator_id = str(uuid4())
        created = await _create(unit_env, creator_id)
        extend = await unit_env.get(ExtendUserPollUseCase)
        end_at = clock.now() + timedelta(days=1)

        response = await extend.execute(
            ExtendUserPollRequest(
                poll_id=created.poll_id, user_id=creator_id, end_at=end_at
            )
        )

        assert response.end_at == end_at
        assert response.status == UserPollStatus.LIVE

    @pytest.mark.asyncio
    async def test_extend_by_stranger(self, unit_env):
        clock = await unit_env.get(Clock)
        created = await _create(unit_env, str(uuid4()))
        extend = await unit_env.get(ExtendUserPollUseCase)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await extend.execute(
                ExtendUserPollRequest(
                    poll_id=created.poll_id,
                    user_id=str(uuid4()),
                    end_at=clock.now() + timedelta(days=1),
                )
            )

        assert exc_info.value.code == ErrorCode.NOT_FOUND_OR_FORBIDDEN

    def test_naive_end_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            ExtendUserPollRequest(
                poll_id=str(uuid4()),
                user_id=str(uuid4()),
                end_at="2099-01-01T10:00:00",
            )
