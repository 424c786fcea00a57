"""Poll config (template) routes. All require the admin role."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status

from pulse.application.usecase.poll_config import (
    ClonePollConfigUseCase,
    CreatePollConfigRequest,
    CreatePollConfigUseCase,
    GetPollConfigUseCase,
    PollConfigIdRequest,
    PollConfigResponse,
    PublishPollConfigUseCase,
    UpdatePollConfigRequest,
    UpdatePollConfigUseCase,
)
from pulse.domain.service import JWTService, PollConfigChanges
from pulse.interface.api.auth import require_admin

router = APIRouter(
    prefix="/poll-configs", tags=["poll-configs"], route_class=DishkaRoute
)


@router.post(
    "", response_model=PollConfigResponse, status_code=status.HTTP_201_CREATED
)
async def create_poll_config(
    request: CreatePollConfigRequest,
    create_poll_config_use_case: FromDishka[CreatePollConfigUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PollConfigResponse:
    """Create a poll config at version 1 with a unique slug."""
    require_admin(jwt_service, auth_token, authorization)
    return await create_poll_config_use_case.execute(request)


@router.get("/{config_id}", response_model=PollConfigResponse)
async def get_poll_config(
    config_id: str,
    get_poll_config_use_case: FromDishka[GetPollConfigUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PollConfigResponse:
    require_admin(jwt_service, auth_token, authorization)
    return await get_poll_config_use_case.execute(
        PollConfigIdRequest(config_id=config_id)
    )


@router.patch("/{config_id}", response_model=PollConfigResponse)
async def update_poll_config(
    config_id: str,
    changes: PollConfigChanges,
    update_poll_config_use_case: FromDishka[UpdatePollConfigUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PollConfigResponse:
    """Update a poll config; its version is bumped."""
    require_admin(jwt_service, auth_token, authorization)
    return await update_poll_config_use_case.execute(
        UpdatePollConfigRequest(config_id=config_id, changes=changes)
    )


@router.post("/{config_id}/publish", response_model=PollConfigResponse)
async def publish_poll_config(
    config_id: str,
    publish_poll_config_use_case: FromDishka[PublishPollConfigUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PollConfigResponse:
    require_admin(jwt_service, auth_token, authorization)
    return await publish_poll_config_use_case.execute(
        PollConfigIdRequest(config_id=config_id)
    )


@router.post(
    "/{config_id}/clone",
    response_model=PollConfigResponse,
    status_code=status.HTTP_201_CREATED,
)
async def clone_poll_config(
    config_id: str,
    clone_poll_config_use_case: FromDishka[ClonePollConfigUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PollConfigResponse:
    """Copy a config into a fresh DRAFT."""
    require_admin(jwt_service, auth_token, authorization)
    return await clone_poll_config_use_case.execute(
        PollConfigIdRequest(config_id=config_id)
    )
