"""Unit tests for accept and reject invite use cases."""

from uuid import uuid4

import pytest

from pulse.application.usecase.invite import (
    AcceptInviteRequest,
    AcceptInviteUseCase,
    InviteTokenRequest,
    RejectInviteUseCase,
)
from pulse.application.usecase.user_poll import (
    CreateInvitesRequest,
    CreateInvitesUseCase,
    CreateUserPollRequest,
    CreateUserPollUseCase,
)
from pulse.domain.error import ConflictError, ErrorCode
from pulse.domain.value import InviteStatus, StartMode, UserPollType
from tests.conftest import make_poll_category
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _invite_token(env) -> str:
    creator_id = str(uuid4())
    category = await make_poll_category(env)
    poll = await (await env.get(CreateUserPollUseCase)).execute(
        CreateUserPollRequest(
            creator_id=creator_id,
            category_id=category.id,
            type=UserPollType.RATING,
            title="Rate the session",
            options=["1", "2", "3", "4", "5"],
            start_mode=StartMode.INSTANT,
        )
    )
    response = await (await env.get(CreateInvitesUseCase)).execute(
        CreateInvitesRequest(
            poll_id=poll.poll_id, user_id=creator_id, mobiles=["+15550100"]
        )
    )
    return response.invites[0].token


class TestAcceptInviteUseCase:
    """Tests for AcceptInviteUseCase and RejectInviteUseCase."""

    @pytest.mark.asyncio
    async def test_accept_then_reject(self, unit_env):
        token = await _invite_token(unit_env)
        accept = await unit_env.get(AcceptInviteUseCase)
        reject = await unit_env.get(RejectInviteUseCase)

        response = await accept.execute(
            AcceptInviteRequest(token=token, user_id=str(uuid4()))
        )

        assert response.status == InviteStatus.ACCEPTED
        with pytest.raises(ConflictError) as exc_info:
            await reject.execute(InviteTokenRequest(token=token))
        assert exc_info.value.code == ErrorCode.INVITE_ALREADY_USED

    @pytest.mark.asyncio
    async def test_reject_pending_invite(self, unit_env):
        token = await _invite_token(unit_env)
        reject = await unit_env.get(RejectInviteUseCase)

        response = await reject.execute(InviteTokenRequest(token=token))

        assert response.status == InviteStatus.REJECTED
