"""Unit tests for InheritanceService."""

from uuid import uuid4

import pytest

from pulse.domain.model import Category
from pulse.domain.repository import CategoryRepository
from pulse.domain.service import InheritanceService, ParentDefaults
from pulse.domain.value import (
    AdminCurated,
    CategoryDomain,
    CategoryId,
    CategoryStatus,
    Override,
    YesNo,
)
from tests.conftest import make_child_category, make_parent_category
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestResolveEffective:
    """Tests for resolve_effective."""

    @pytest.mark.asyncio
    async def test_child_inherits_parent_defaults(self, unit_env):
        """Unset child overrides should resolve to the parent defaults."""
        # Arrange
        service = await unit_env.get(InheritanceService)
        parent = await make_parent_category(
            unit_env,
            claimable=YesNo.YES,
            request_allowed=YesNo.NO,
            admin_curated=AdminCurated.PARTIAL,
        )
        child = await make_child_category(unit_env, parent)

        # Act
        effective = await service.resolve_effective(child.id)

        # Assert
        assert effective is not None
        assert effective.claimable == YesNo.YES
        assert effective.request_allowed == YesNo.NO
        assert effective.admin_curated == AdminCurated.PARTIAL
        assert effective.status == CategoryStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_child_override_wins(self, unit_env):
        """An explicit override should win over the parent default."""
        service = await unit_env.get(InheritanceService)
        parent = await make_parent_category(unit_env, claimable=YesNo.YES)
        child = await make_child_category(unit_env, parent, claimable=YesNo.NO)

        effective = await service.resolve_effective(child.id)

        assert effective.claimable == YesNo.NO
        assert effective.allows_participation is False

    @pytest.mark.asyncio
    async def test_disabled_parent_disables_child(self, unit_env):
        """A child of a disabled parent should be effectively disabled."""
        service = await unit_env.get(InheritanceService)
        parent = await make_parent_category(unit_env, status=CategoryStatus.DISABLED)
        child = await make_child_category(unit_env, parent)

        effective = await service.resolve_effective(child.id)

        assert effective.status == CategoryStatus.DISABLED
        assert effective.is_active is False

    @pytest.mark.asyncio
    async def test_parent_resolves_to_its_own_defaults(self, unit_env):
        service = await unit_env.get(InheritanceService)
        parent = await make_parent_category(
            unit_env, claimable=YesNo.NO, admin_curated=AdminCurated.FULL
        )

        effective = await service.resolve_effective(parent.id)

        assert effective.claimable == YesNo.NO
        assert effective.admin_curated == AdminCurated.FULL

    @pytest.mark.asyncio
    async def test_orphaned_child_fails_closed(self, unit_env):
        """A child whose parent is gone should resolve inherited fields to NO."""
        service = await unit_env.get(InheritanceService)
        category_repo = await unit_env.get(CategoryRepository)
        orphan = await category_repo.save(
            Category(
                id=CategoryId(uuid4()),
                name="Orphan",
                is_parent=False,
                parent_id=CategoryId(uuid4()),
                claimable=Override(value=YesNo.YES),
            )
        )

        effective = await service.resolve_effective(orphan.id)

        assert effective.claimable == YesNo.YES
        assert effective.request_allowed == YesNo.NO
        assert effective.admin_curated == AdminCurated.NO

    @pytest.mark.asyncio
    async def test_missing_category_resolves_to_none(self, unit_env):
        service = await unit_env.get(InheritanceService)

        assert await service.resolve_effective(CategoryId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_other_domain_resolves_to_none(self, unit_env):
        """A PROFILE category is invisible to POLL lookups."""
        service = await unit_env.get(InheritanceService)
        parent = await make_parent_category(unit_env, domain=CategoryDomain.PROFILE)
        child = await make_child_category(unit_env, parent)

        assert await service.resolve_effective(child.id) is None
        assert (
            await service.resolve_effective(child.id, CategoryDomain.PROFILE)
            is not None
        )


class TestPreviewImpact:
    """Tests for preview_impact."""

    @pytest.mark.asyncio
    async def test_counts_children_inheriting_any_field(self, unit_env):
        # Arrange
        service = await unit_env.get(InheritanceService)
        parent = await make_parent_category(unit_env)
        inheriting = await make_child_category(unit_env, parent, claimable=YesNo.NO)
        await make_child_category(
            unit_env,
            parent,
            claimable=YesNo.YES,
            request_allowed=YesNo.YES,
            admin_curated=AdminCurated.NO,
            name="Pinned",
        )

        # Act
        preview = await service.preview_impact(
            parent.id, ParentDefaults(claimable_default=YesNo.NO)
        )

        # Assert
        assert preview.parent_id == parent.id
        assert preview.affected_child_count == 1
        assert preview.affected_child_ids == [inheriting.id]

    @pytest.mark.asyncio
    async def test_lists_at_most_ten_ids(self, unit_env):
        service = await unit_env.get(InheritanceService)
        parent = await make_parent_category(unit_env)
        for index in range(12):
            await make_child_category(unit_env, parent, name=f"Child {index:02d}")

        preview = await service.preview_impact(parent.id, ParentDefaults())

        assert preview.affected_child_count == 12
        assert len(preview.affected_child_ids) == 10

    @pytest.mark.asyncio
    async def test_includes_disabled_children(self, unit_env):
        service = await unit_env.get(InheritanceService)
        parent = await make_parent_category(unit_env)
        await make_child_category(unit_env, parent, status=CategoryStatus.DISABLED)

        preview = await service.preview_impact(parent.id, ParentDefaults())

        assert preview.affected_child_count == 1
