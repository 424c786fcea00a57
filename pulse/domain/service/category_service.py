"""Category domain service."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from pulse.domain.error import DomainError, ErrorCode
from pulse.domain.model.category import Category
from pulse.domain.repository import CategoryRepository
from pulse.domain.value import (
    AdminCurated,
    CategoryDomain,
    CategoryId,
    CategoryStatus,
    YesNo,
    inheritable,
)

from .base import Service
from .clock import Clock
from .inheritance_service import (
    EffectiveCategory,
    ImpactPreview,
    InheritanceService,
    ParentDefaults,
)


class CategoryDraft(BaseModel):
    """Fields of a new category. ``None`` overrides mean "inherit"."""

    name: str
    domain: CategoryDomain = CategoryDomain.POLL
    is_parent: bool = False
    parent_id: CategoryId | None = None
    status: CategoryStatus = CategoryStatus.ACTIVE
    claimable: YesNo | None = None
    request_allowed: YesNo | None = None
    admin_curated: AdminCurated | None = None
    claimable_default: YesNo = YesNo.NO
    request_allowed_default: YesNo = YesNo.NO
    admin_curated_default: AdminCurated = AdminCurated.NO
    display_order: int = 0


class CategoryChanges(BaseModel):
    """Partial update. Only explicitly set fields are applied."""

    name: str | None = None
    parent_id: CategoryId | None = None
    status: CategoryStatus | None = None
    claimable: YesNo | None = None
    request_allowed: YesNo | None = None
    admin_curated: AdminCurated | None = None
    claimable_default: YesNo | None = None
    request_allowed_default: YesNo | None = None
    admin_curated_default: AdminCurated | None = None
    display_order: int | None = None


_OVERRIDE_FIELDS = ("claimable", "request_allowed", "admin_curated")


class CategoryService(Service):
    """Domain service for category tree operations."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        inheritance_service: InheritanceService,
        clock: Clock,
    ) -> None:
        """Initialize category service.

        Args:
            category_repository: Category repository
            inheritance_service: Inheritance resolver
            clock: Time source
        """
        self.category_repository = category_repository
        self.inheritance_service = inheritance_service
        self.clock = clock

    async def get_category(self, category_id: CategoryId) -> Category:
        """Get a category or raise CATEGORY_NOT_FOUND."""
        category = await self.category_repository.find_by_id(category_id)
        if category is None:
            raise DomainError.from_code(ErrorCode.CATEGORY_NOT_FOUND)
        return category

    async def create_category(self, draft: CategoryDraft) -> Category:
        """Create a parent or child category.

        Args:
            draft: Category fields

        Returns:
            Created category

        Raises:
            ValidationError: INVALID_PARENT if the hierarchy is malformed
        """
        with logfire.span(
            "category_service.create_category",
            name=draft.name,
            domain=draft.domain.value,
            is_parent=draft.is_parent,
        ):
            await self._validate_parent(draft.is_parent, draft.parent_id, draft.domain)

            now = self.clock.now()
            category = Category(
                id=CategoryId(uuid4()),
                name=draft.name,
                domain=draft.domain,
                is_parent=draft.is_parent,
                parent_id=draft.parent_id,
                status=draft.status,
                claimable=inheritable(draft.claimable),
                request_allowed=inheritable(draft.request_allowed),
                admin_curated=inheritable(draft.admin_curated),
                claimable_default=draft.claimable_default,
                request_allowed_default=draft.request_allowed_default,
                admin_curated_default=draft.admin_curated_default,
                display_order=draft.display_order,
                created_at=now,
                updated_at=now,
            )
            saved = await self.category_repository.save(category)
            logfire.info("Category created", category_id=str(saved.id))
            return saved

    async def update_category(
        self, category_id: CategoryId, changes: CategoryChanges
    ) -> Category:
        """Apply a partial update to a category.

        Setting an override to ``None`` reverts it to inheriting.

        Args:
            category_id: Category to update
            changes: Fields to change

        Returns:
            Updated category

        Raises:
            NotFoundError: CATEGORY_NOT_FOUND
            ValidationError: INVALID_PARENT if the new parent is not valid
        """
        with logfire.span(
            "category_service.update_category",
            category_id=str(category_id),
            fields=sorted(changes.model_fields_set),
        ):
            category = await self.get_category(category_id)

            update: dict = {}
            for field in changes.model_fields_set:
                value = getattr(changes, field)
                if field in _OVERRIDE_FIELDS:
                    update[field] = inheritable(value)
                elif field == "parent_id" or value is not None:
                    update[field] = value

            if "parent_id" in update and update["parent_id"] != category.parent_id:
                if update["parent_id"] == category.id:
                    raise DomainError.from_code(ErrorCode.INVALID_PARENT)
                await self._validate_parent(
                    category.is_parent, update["parent_id"], category.domain
                )

            update["updated_at"] = self.clock.now()
            saved = await self.category_repository.save(
                category.model_copy(update=update)
            )
            logfire.info("Category updated", category_id=str(category_id))
            return saved

    async def delete_category(self, category_id: CategoryId) -> None:
        """Delete a category.

        Raises:
            NotFoundError: CATEGORY_NOT_FOUND
            ConflictError: CATEGORY_HAS_CHILDREN while children exist
        """
        with logfire.span(
            "category_service.delete_category", category_id=str(category_id)
        ):
            category = await self.get_category(category_id)
            children = await self.category_repository.find_children(category.id)
            if children:
                logfire.warn(
                    "Refusing to delete category with children",
                    category_id=str(category_id),
                    children=len(children),
                )
                raise DomainError.from_code(ErrorCode.CATEGORY_HAS_CHILDREN)
            await self.category_repository.delete(category_id)
            logfire.info("Category deleted", category_id=str(category_id))

    async def get_effective(
        self,
        category_id: CategoryId,
        domain: CategoryDomain = CategoryDomain.POLL,
    ) -> EffectiveCategory:
        """Effective values of a category, or CATEGORY_NOT_FOUND."""
        effective = await self.inheritance_service.resolve_effective(category_id, domain)
        if effective is None:
            raise DomainError.from_code(ErrorCode.CATEGORY_NOT_FOUND)
        return effective

    async def preview_impact(
        self, parent_id: CategoryId, defaults: ParentDefaults
    ) -> ImpactPreview:
        """Preview which children a change of parent defaults would reach.

        Raises:
            NotFoundError: CATEGORY_NOT_FOUND if the parent does not exist
            ValidationError: INVALID_PARENT if the category is not a parent
        """
        parent = await self.get_category(parent_id)
        if not parent.is_parent:
            raise DomainError.from_code(ErrorCode.INVALID_PARENT)
        return await self.inheritance_service.preview_impact(
            parent.id, defaults, domain=parent.domain
        )

    async def _validate_parent(
        self,
        is_parent: bool,
        parent_id: CategoryId | None,
        domain: CategoryDomain,
    ) -> None:
        if is_parent:
            if parent_id is not None:
                raise DomainError.from_code(
                    ErrorCode.INVALID_PARENT, "Parent categories cannot have a parent"
                )
            return

        if parent_id is None:
            raise DomainError.from_code(
                ErrorCode.INVALID_PARENT, "Child categories need a parent"
            )

        parent = await self.category_repository.find_by_id(parent_id)
        if parent is None or not parent.is_parent or parent.domain != domain:
            logfire.warn("Invalid parent category", parent_id=str(parent_id))
            raise DomainError.from_code(ErrorCode.INVALID_PARENT)
