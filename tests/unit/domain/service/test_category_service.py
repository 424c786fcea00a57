"""Unit tests for CategoryService and CategoryGate."""

from uuid import uuid4

import pytest

from pulse.domain.error import (
    BusinessRuleViolationError,
    ConflictError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from pulse.domain.service import (
    CategoryChanges,
    CategoryDraft,
    CategoryGate,
    CategoryService,
    ParentDefaults,
)
from pulse.domain.value import (
    CategoryDomain,
    CategoryId,
    CategoryStatus,
    Inherit,
    Override,
    YesNo,
)
from tests.conftest import make_child_category, make_parent_category
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCategory:
    """Tests for create_category."""

    @pytest.mark.asyncio
    async def test_create_parent_and_child(self, unit_env):
        # Arrange
        service = await unit_env.get(CategoryService)

        # Act
        parent = await service.create_category(
            CategoryDraft(name="Sports", is_parent=True, claimable_default=YesNo.YES)
        )
        child = await service.create_category(
            CategoryDraft(
                name="Football", parent_id=parent.id, request_allowed=YesNo.NO
            )
        )

        # Assert
        assert parent.is_parent is True
        assert parent.claimable_default == YesNo.YES
        assert child.parent_id == parent.id
        assert isinstance(child.claimable, Inherit)
        assert child.request_allowed == Override(value=YesNo.NO)

    @pytest.mark.asyncio
    async def test_parent_with_parent_is_invalid(self, unit_env):
        service = await unit_env.get(CategoryService)
        parent = await make_parent_category(unit_env)

        with pytest.raises(ValidationError) as exc_info:
            await service.create_category(
                CategoryDraft(name="Nested", is_parent=True, parent_id=parent.id)
            )

        assert exc_info.value.code == ErrorCode.INVALID_PARENT

    @pytest.mark.asyncio
    async def test_child_of_child_is_invalid(self, unit_env):
        service = await unit_env.get(CategoryService)
        parent = await make_parent_category(unit_env)
        child = await make_child_category(unit_env, parent)

        with pytest.raises(ValidationError) as exc_info:
            await service.create_category(
                CategoryDraft(name="Deep", parent_id=child.id)
            )

        assert exc_info.value.code == ErrorCode.INVALID_PARENT

    @pytest.mark.asyncio
    async def test_parent_from_other_domain_is_invalid(self, unit_env):
        service = await unit_env.get(CategoryService)
        parent = await make_parent_category(unit_env, domain=CategoryDomain.PROFILE)

        with pytest.raises(ValidationError):
            await service.create_category(
                CategoryDraft(name="Mixed", parent_id=parent.id)
            )

    @pytest.mark.asyncio
    async def test_child_without_parent_is_invalid(self, unit_env):
        service = await unit_env.get(CategoryService)

        with pytest.raises(ValidationError) as exc_info:
            await service.create_category(CategoryDraft(name="Loose"))

        assert exc_info.value.code == ErrorCode.INVALID_PARENT


class TestUpdateCategory:
    """Tests for update_category."""

    @pytest.mark.asyncio
    async def test_null_override_reverts_to_inherit(self, unit_env):
        """Explicitly setting an override to None should make it inherit again."""
        service = await unit_env.get(CategoryService)
        parent = await make_parent_category(unit_env)
        child = await make_child_category(unit_env, parent, claimable=YesNo.NO)

        updated = await service.update_category(
            child.id, CategoryChanges(claimable=None)
        )

        assert isinstance(updated.claimable, Inherit)

    @pytest.mark.asyncio
    async def test_unset_fields_are_untouched(self, unit_env):
        service = await unit_env.get(CategoryService)
        parent = await make_parent_category(unit_env)
        child = await make_child_category(unit_env, parent, claimable=YesNo.NO)

        updated = await service.update_category(
            child.id, CategoryChanges(name="Renamed")
        )

        assert updated.name == "Renamed"
        assert updated.claimable == Override(value=YesNo.NO)

    @pytest.mark.asyncio
    async def test_disable_category(self, unit_env):
        service = await unit_env.get(CategoryService)
        parent = await make_parent_category(unit_env)

        updated = await service.update_category(
            parent.id, CategoryChanges(status=CategoryStatus.DISABLED)
        )

        assert updated.status == CategoryStatus.DISABLED

    @pytest.mark.asyncio
    async def test_child_cannot_drop_its_parent(self, unit_env):
        service = await unit_env.get(CategoryService)
        parent = await make_parent_category(unit_env)
        child = await make_child_category(unit_env, parent)

        with pytest.raises(ValidationError) as exc_info:
            await service.update_category(child.id, CategoryChanges(parent_id=None))

        assert exc_info.value.code == ErrorCode.INVALID_PARENT
        assert (await service.get_category(child.id)).parent_id == parent.id

    @pytest.mark.asyncio
    async def test_child_moves_to_another_parent(self, unit_env):
        service = await unit_env.get(CategoryService)
        parent = await make_parent_category(unit_env)
        other = await make_parent_category(unit_env, name="Sports")
        child = await make_child_category(unit_env, parent)

        updated = await service.update_category(
            child.id, CategoryChanges(parent_id=other.id)
        )

        assert updated.parent_id == other.id

    @pytest.mark.asyncio
    async def test_update_missing_category(self, unit_env):
        service = await unit_env.get(CategoryService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.update_category(
                CategoryId(uuid4()), CategoryChanges(name="x")
            )

        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_FOUND


class TestDeleteCategory:
    """Tests for delete_category."""

    @pytest.mark.asyncio
    async def test_parent_with_children_cannot_be_deleted(self, unit_env):
        service = await unit_env.get(CategoryService)
        parent = await make_parent_category(unit_env)
        await make_child_category(unit_env, parent)

        with pytest.raises(ConflictError) as exc_info:
            await service.delete_category(parent.id)

        assert exc_info.value.code == ErrorCode.CATEGORY_HAS_CHILDREN

    @pytest.mark.asyncio
    async def test_delete_leaf(self, unit_env):
        service = await unit_env.get(CategoryService)
        parent = await make_parent_category(unit_env)
        child = await make_child_category(unit_env, parent)

        await service.delete_category(child.id)
        await service.delete_category(parent.id)

        with pytest.raises(NotFoundError):
            await service.get_category(parent.id)


class TestServicePreviewImpact:
    """Tests for CategoryService.preview_impact."""

    @pytest.mark.asyncio
    async def test_child_is_not_a_parent(self, unit_env):
        service = await unit_env.get(CategoryService)
        parent = await make_parent_category(unit_env)
        child = await make_child_category(unit_env, parent)

        with pytest.raises(ValidationError) as exc_info:
            await service.preview_impact(child.id, ParentDefaults())

        assert exc_info.value.code == ErrorCode.INVALID_PARENT


class TestCategoryGate:
    """Tests for CategoryGate.ensure_allowed."""

    @pytest.mark.asyncio
    async def test_allowed_child_passes(self, unit_env):
        gate = await unit_env.get(CategoryGate)
        parent = await make_parent_category(unit_env)
        child = await make_child_category(unit_env, parent)

        await gate.ensure_allowed(child.id)

    @pytest.mark.asyncio
    async def test_missing_category(self, unit_env):
        gate = await unit_env.get(CategoryGate)

        with pytest.raises(NotFoundError) as exc_info:
            await gate.ensure_allowed(CategoryId(uuid4()))

        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_FOUND

    @pytest.mark.asyncio
    async def test_profile_category_is_not_found(self, unit_env):
        gate = await unit_env.get(CategoryGate)
        parent = await make_parent_category(unit_env, domain=CategoryDomain.PROFILE)
        child = await make_child_category(unit_env, parent)

        with pytest.raises(NotFoundError):
            await gate.ensure_allowed(child.id)

    @pytest.mark.asyncio
    async def test_parent_is_rejected(self, unit_env):
        gate = await unit_env.get(CategoryGate)
        parent = await make_parent_category(unit_env)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await gate.ensure_allowed(parent.id)

        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_CHILD

    @pytest.mark.asyncio
    async def test_disabled_child_is_rejected(self, unit_env):
        gate = await unit_env.get(CategoryGate)
        parent = await make_parent_category(unit_env)
        child = await make_child_category(
            unit_env, parent, status=CategoryStatus.DISABLED
        )

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await gate.ensure_allowed(child.id)

        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_ACTIVE

    @pytest.mark.asyncio
    async def test_disabled_parent_is_rejected(self, unit_env):
        gate = await unit_env.get(CategoryGate)
        parent = await make_parent_category(unit_env, status=CategoryStatus.DISABLED)
        child = await make_child_category(unit_env, parent)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await gate.ensure_allowed(child.id)

        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_ACTIVE

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("claimable", "request_allowed"),
        [(YesNo.NO, YesNo.YES), (YesNo.YES, YesNo.NO), (YesNo.NO, YesNo.NO)],
    )
    async def test_participation_requires_both_flags(
        self, unit_env, claimable, request_allowed
    ):
        gate = await unit_env.get(CategoryGate)
        parent = await make_parent_category(
            unit_env, claimable=claimable, request_allowed=request_allowed
        )
        child = await make_child_category(unit_env, parent)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await gate.ensure_allowed(child.id)

        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_ALLOWED
