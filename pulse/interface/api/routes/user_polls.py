"""User poll and invite group routes. All require an authenticated caller."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import AwareDatetime, BaseModel, Field

from pulse.application.usecase.user_poll import (
    CreateInvitesRequest,
    CreateInvitesResponse,
    CreateInvitesUseCase,
    CreateOwnerInviteRequest,
    CreateOwnerInviteUseCase,
    CreateUserPollRequest,
    CreateUserPollUseCase,
    EndUserPollRequest,
    EndUserPollUseCase,
    ExtendUserPollRequest,
    ExtendUserPollUseCase,
    GetUserPollRequest,
    GetUserPollUseCase,
    InviteGroupResponse,
    InviteLinkItem,
    ListGroupsRequest,
    ListGroupsResponse,
    ListGroupsUseCase,
    SaveGroupRequest,
    SaveGroupUseCase,
    UserPollResponse,
)
from pulse.domain.service import InviteTargets, JWTService, UserPollDraft
from pulse.interface.api.auth import require_identity

router = APIRouter(tags=["user-polls"], route_class=DishkaRoute)


class ExtendUserPollAPIRequest(BaseModel):
    """API request for moving the end of a poll."""

    end_at: AwareDatetime


class SaveGroupAPIRequest(BaseModel):
    """API request for creating or updating an invite group."""

    name: str = Field(min_length=1, max_length=200)
    mobiles: list[str] = Field(default_factory=list)


@router.post(
    "/user-polls", response_model=UserPollResponse, status_code=status.HTTP_201_CREATED
)
async def create_user_poll(
    draft: UserPollDraft,
    create_user_poll_use_case: FromDishka[CreateUserPollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UserPollResponse:
    """Create a LIVE or SCHEDULED poll owned by the caller."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await create_user_poll_use_case.execute(
        CreateUserPollRequest(creator_id=identity.user_id, **draft.model_dump())
    )


@router.get("/user-polls/{poll_id}", response_model=UserPollResponse)
async def get_user_poll(
    poll_id: str,
    get_user_poll_use_case: FromDishka[GetUserPollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UserPollResponse:
    require_identity(jwt_service, auth_token, authorization)
    return await get_user_poll_use_case.execute(GetUserPollRequest(poll_id=poll_id))


@router.post("/user-polls/{poll_id}/end", response_model=UserPollResponse)
async def end_user_poll(
    poll_id: str,
    end_user_poll_use_case: FromDishka[EndUserPollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UserPollResponse:
    """End the caller's poll now."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await end_user_poll_use_case.execute(
        EndUserPollRequest(poll_id=poll_id, user_id=identity.user_id)
    )


@router.post("/user-polls/{poll_id}/extend", response_model=UserPollResponse)
async def extend_user_poll(
    poll_id: str,
    request: ExtendUserPollAPIRequest,
    extend_user_poll_use_case: FromDishka[ExtendUserPollUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UserPollResponse:
    """Move the end of the caller's poll."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await extend_user_poll_use_case.execute(
        ExtendUserPollRequest(
            poll_id=poll_id, user_id=identity.user_id, end_at=request.end_at
        )
    )


@router.post("/user-polls/{poll_id}/owner-invite", response_model=InviteLinkItem)
async def create_owner_invite(
    poll_id: str,
    create_owner_invite_use_case: FromDishka[CreateOwnerInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> InviteLinkItem:
    """The caller's own invite link; repeated calls return the same token."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await create_owner_invite_use_case.execute(
        CreateOwnerInviteRequest(poll_id=poll_id, user_id=identity.user_id)
    )


@router.post(
    "/user-polls/{poll_id}/invites",
    response_model=CreateInvitesResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invites(
    poll_id: str,
    targets: InviteTargets,
    create_invites_use_case: FromDishka[CreateInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateInvitesResponse:
    """Invite mobiles, existing groups and an optional new group."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await create_invites_use_case.execute(
        CreateInvitesRequest(
            poll_id=poll_id,
            user_id=identity.user_id,
            mobiles=targets.mobiles,
            existing_group_ids=targets.existing_group_ids,
            new_group=targets.new_group,
        )
    )


@router.get("/invite-groups", response_model=ListGroupsResponse)
async def list_groups(
    list_groups_use_case: FromDishka[ListGroupsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListGroupsResponse:
    identity = require_identity(jwt_service, auth_token, authorization)
    return await list_groups_use_case.execute(
        ListGroupsRequest(user_id=identity.user_id)
    )


@router.post(
    "/invite-groups",
    response_model=InviteGroupResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_group(
    request: SaveGroupAPIRequest,
    save_group_use_case: FromDishka[SaveGroupUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> InviteGroupResponse:
    identity = require_identity(jwt_service, auth_token, authorization)
    return await save_group_use_case.execute(
        SaveGroupRequest(
            user_id=identity.user_id, name=request.name, mobiles=request.mobiles
        )
    )


@router.put("/invite-groups/{group_id}", response_model=InviteGroupResponse)
async def update_group(
    group_id: str,
    request: SaveGroupAPIRequest,
    save_group_use_case: FromDishka[SaveGroupUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> InviteGroupResponse:
    """Rename an owned group and replace its members."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await save_group_use_case.execute(
        SaveGroupRequest(
            user_id=identity.user_id,
            group_id=group_id,
            name=request.name,
            mobiles=request.mobiles,
        )
    )
