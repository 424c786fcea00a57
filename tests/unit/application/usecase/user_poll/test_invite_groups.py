"""Unit tests for invite group use cases."""

from uuid import uuid4

import pytest

from pulse.application.usecase.user_poll import (
    ListGroupsRequest,
    ListGroupsUseCase,
    SaveGroupRequest,
    SaveGroupUseCase,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSaveGroupUseCase:
    """Tests for SaveGroupUseCase and ListGroupsUseCase."""

    @pytest.mark.asyncio
    async def test_save_group_create_then_update(self, unit_env):
        owner_id = str(uuid4())
        save_group = await unit_env.get(SaveGroupUseCase)
        list_groups = await unit_env.get(ListGroupsUseCase)
        created = await save_group.execute(
            SaveGroupRequest(user_id=owner_id, name="Old", mobiles=["+15550100"])
        )

        await save_group.execute(
            SaveGroupRequest(
                user_id=owner_id,
                group_id=created.group_id,
                name="New",
                mobiles=["+15550101"],
            )
        )
        response = await list_groups.execute(ListGroupsRequest(user_id=owner_id))

        assert [(g.name, g.members) for g in response.groups] == [
            ("New", ["+15550101"])
        ]
