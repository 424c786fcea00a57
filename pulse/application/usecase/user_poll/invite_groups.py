"""Invite group use cases."""

from pydantic import BaseModel, Field

from pulse.domain.service import UserPollService
from pulse.domain.value import InviteGroupId, UserId

from ..base import BaseUseCase, parse_id
from .common import InviteGroupResponse


class ListGroupsRequest(BaseModel):
    """List groups request."""

    user_id: str  # Authenticated caller


class ListGroupsResponse(BaseModel):
    """The caller's groups, newest first."""

    groups: list[InviteGroupResponse]


class SaveGroupRequest(BaseModel):
    """Create or update group request."""

    user_id: str  # Authenticated caller
    group_id: str | None = None  # Set when updating
    name: str = Field(min_length=1, max_length=200)
    mobiles: list[str] = Field(default_factory=list)


class ListGroupsUseCase(BaseUseCase):
    """Use case for listing the caller's invite groups."""

    def __init__(self, user_poll_service: UserPollService) -> None:
        self.user_poll_service = user_poll_service

    async def execute(self, request: ListGroupsRequest) -> ListGroupsResponse:
        groups = await self.user_poll_service.list_groups(
            parse_id(request.user_id, UserId)
        )
        return ListGroupsResponse(
            groups=[InviteGroupResponse.from_group(group) for group in groups]
        )


class SaveGroupUseCase(BaseUseCase):
    """Use case for creating a group, or renaming and refilling an owned one."""

    def __init__(self, user_poll_service: UserPollService) -> None:
        self.user_poll_service = user_poll_service

    async def execute(self, request: SaveGroupRequest) -> InviteGroupResponse:
        """Create or update the group.

        Raises:
            NotFoundError: GROUP_NOT_FOUND when updating a group the caller
                does not own
        """
        user_id = parse_id(request.user_id, UserId)
        if request.group_id is None:
            group = await self.user_poll_service.create_group(
                user_id, request.name, request.mobiles
            )
        else:
            group = await self.user_poll_service.update_group(
                user_id,
                parse_id(request.group_id, InviteGroupId),
                request.name,
                request.mobiles,
            )
        return InviteGroupResponse.from_group(group)
