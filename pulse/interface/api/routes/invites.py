"""Invite routes.

Validating and rejecting work with the token alone; accepting binds the
invite to the authenticated caller.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from pulse.application.usecase.invite import (
    AcceptInviteRequest,
    AcceptInviteUseCase,
    InviteResponse,
    InviteTokenRequest,
    RejectInviteUseCase,
    ValidateInviteUseCase,
)
from pulse.domain.service import JWTService
from pulse.interface.api.auth import require_identity

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


@router.get("/{token}", response_model=InviteResponse)
async def validate_invite(
    token: str,
    validate_invite_use_case: FromDishka[ValidateInviteUseCase],
) -> InviteResponse:
    """Check that an invite link is usable."""
    return await validate_invite_use_case.execute(InviteTokenRequest(token=token))


@router.post("/{token}/accept", response_model=InviteResponse)
async def accept_invite(
    token: str,
    accept_invite_use_case: FromDishka[AcceptInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> InviteResponse:
    identity = require_identity(jwt_service, auth_token, authorization)
    return await accept_invite_use_case.execute(
        AcceptInviteRequest(token=token, user_id=identity.user_id)
    )


@router.post("/{token}/reject", response_model=InviteResponse)
async def reject_invite(
    token: str,
    reject_invite_use_case: FromDishka[RejectInviteUseCase],
) -> InviteResponse:
    return await reject_invite_use_case.execute(InviteTokenRequest(token=token))
