"""User poll use cases."""

from .common import (
    InviteGroupResponse,
    InviteLinkItem,
    UserPollOptionItem,
    UserPollResponse,
)
from .create_invites import (
    CreateInvitesRequest,
    CreateInvitesResponse,
    CreateInvitesUseCase,
)
from .create_owner_invite import CreateOwnerInviteRequest, CreateOwnerInviteUseCase
from .create_user_poll import CreateUserPollRequest, CreateUserPollUseCase
from .end_user_poll import EndUserPollRequest, EndUserPollUseCase
from .extend_user_poll import ExtendUserPollRequest, ExtendUserPollUseCase
from .get_user_poll import GetUserPollRequest, GetUserPollUseCase
from .invite_groups import (
    ListGroupsRequest,
    ListGroupsResponse,
    ListGroupsUseCase,
    SaveGroupRequest,
    SaveGroupUseCase,
)

__all__ = [
    "CreateInvitesRequest",
    "CreateInvitesResponse",
    "CreateInvitesUseCase",
    "CreateOwnerInviteRequest",
    "CreateOwnerInviteUseCase",
    "CreateUserPollRequest",
    "CreateUserPollUseCase",
    "EndUserPollRequest",
    "EndUserPollUseCase",
    "ExtendUserPollRequest",
    "ExtendUserPollUseCase",
    "GetUserPollRequest",
    "GetUserPollUseCase",
    "InviteGroupResponse",
    "InviteLinkItem",
    "ListGroupsRequest",
    "ListGroupsResponse",
    "ListGroupsUseCase",
    "SaveGroupRequest",
    "SaveGroupUseCase",
    "UserPollOptionItem",
    "UserPollResponse",
]
