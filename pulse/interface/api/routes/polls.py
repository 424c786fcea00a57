"""Admin poll routes.

Lifecycle and invite issuing require the admin role. Reading published polls
and voting are open to callers, subject to each poll's permissions.
"""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field

from pulse.application.usecase.poll import (
    ClosePollUseCase,
    CreatePollRequest,
    CreatePollUseCase,
    GetPollResponse,
    GetPollUseCase,
    IssueInvitesRequest,
    IssueInvitesResponse,
    IssueInvitesUseCase,
    ListFeedResponse,
    ListFeedUseCase,
    PollIdRequest,
    PollResponse,
    PublishPollUseCase,
    UpdatePollRequest,
    UpdatePollUseCase,
)
from pulse.application.usecase.poll.issue_invites import MAX_INVITES_PER_REQUEST
from pulse.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from pulse.domain.service import JWTService, PollChanges
from pulse.interface.api.auth import optional_identity, require_admin

router = APIRouter(prefix="/polls", tags=["polls"], route_class=DishkaRoute)


class IssueInvitesAPIRequest(BaseModel):
    """API request for minting invite tokens."""

    count: int = Field(ge=1, le=MAX_INVITES_PER_REQUEST)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    response: Any
    invite_token: str | None = None


@router.get("", response_model=ListFeedResponse)
async def list_feed(list_feed_use_case: FromDishka[ListFeedUseCase]) -> ListFeedResponse:
    """Published polls, newest first."""
    return await list_feed_use_case.execute()


@router.post("", response_model=PollResponse, status_code=status.HTTP_201_CREATED)
async def create_poll(
    request: CreatePollRequest,
    create_poll_use_case: FromDishka[CreatePollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PollResponse:
    """Create a DRAFT poll."""
    require_admin(jwt_service, auth_token, authorization)
    return await create_poll_use_case.execute(request)


@router.get("/{poll_id}", response_model=GetPollResponse)
async def get_poll(
    poll_id: str,
    get_poll_use_case: FromDishka[GetPollUseCase],
) -> GetPollResponse:
    return await get_poll_use_case.execute(PollIdRequest(poll_id=poll_id))


@router.patch("/{poll_id}", response_model=PollResponse)
async def update_poll(
    poll_id: str,
    changes: PollChanges,
    update_poll_use_case: FromDishka[UpdatePollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PollResponse:
    """Update a DRAFT poll."""
    require_admin(jwt_service, auth_token, authorization)
    return await update_poll_use_case.execute(
        UpdatePollRequest(poll_id=poll_id, changes=changes)
    )


@router.post("/{poll_id}/publish", response_model=PollResponse)
async def publish_poll(
    poll_id: str,
    publish_poll_use_case: FromDishka[PublishPollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PollResponse:
    require_admin(jwt_service, auth_token, authorization)
    return await publish_poll_use_case.execute(PollIdRequest(poll_id=poll_id))


@router.post("/{poll_id}/close", response_model=PollResponse)
async def close_poll(
    poll_id: str,
    close_poll_use_case: FromDishka[ClosePollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PollResponse:
    require_admin(jwt_service, auth_token, authorization)
    return await close_poll_use_case.execute(PollIdRequest(poll_id=poll_id))


@router.post(
    "/{poll_id}/invites",
    response_model=IssueInvitesResponse,
    status_code=status.HTTP_201_CREATED,
)
async def issue_invites(
    poll_id: str,
    request: IssueInvitesAPIRequest,
    issue_invites_use_case: FromDishka[IssueInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> IssueInvitesResponse:
    """Mint invite tokens with share links."""
    require_admin(jwt_service, auth_token, authorization)
    return await issue_invites_use_case.execute(
        IssueInvitesRequest(poll_id=poll_id, count=request.count)
    )


@router.post(
    "/{poll_id}/vote",
    response_model=CastVoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def cast_vote(
    poll_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CastVoteResponse:
    """Cast a vote.

    Authentication is optional; whether an identity or an invite token is
    needed depends on the poll's permissions.
    """
    identity = optional_identity(jwt_service, auth_token, authorization)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            poll_id=poll_id,
            response=request.response,
            user_id=identity.user_id if identity else None,
            invite_token=request.invite_token,
        )
    )
