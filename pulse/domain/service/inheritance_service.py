"""Category inheritance resolver."""

import logfire
from pydantic import BaseModel, ConfigDict

from pulse.domain.model.category import Category
from pulse.domain.repository import CategoryRepository
from pulse.domain.value import (
    AdminCurated,
    CategoryDomain,
    CategoryId,
    CategoryStatus,
    YesNo,
)

from .base import Service

MAX_IMPACT_IDS = 10


class EffectiveCategory(BaseModel):
    """Resolved permissions and status of a category."""

    model_config = ConfigDict(frozen=True)

    category_id: CategoryId
    claimable: YesNo
    request_allowed: YesNo
    admin_curated: AdminCurated
    status: CategoryStatus

    @property
    def is_active(self) -> bool:
        return self.status == CategoryStatus.ACTIVE

    @property
    def allows_participation(self) -> bool:
        """Both claimable and request-allowed resolve to YES."""
        return self.claimable == YesNo.YES and self.request_allowed == YesNo.YES


class ParentDefaults(BaseModel):
    """Hypothetical new defaults of a parent category."""

    claimable_default: YesNo | None = None
    request_allowed_default: YesNo | None = None
    admin_curated_default: AdminCurated | None = None


class ImpactPreview(BaseModel):
    """Children that would see a change in a parent's defaults."""

    parent_id: CategoryId
    affected_child_count: int
    affected_child_ids: list[CategoryId]


class InheritanceService(Service):
    """Domain service computing effective category values.

    Categories form a two-level tree: a child inherits each unset permission
    from its parent's defaults, and is disabled whenever its parent is.
    """

    def __init__(self, category_repository: CategoryRepository) -> None:
        """Initialize inheritance service.

        Args:
            category_repository: Category repository
        """
        self.category_repository = category_repository

    async def resolve_effective(
        self,
        category_id: CategoryId,
        domain: CategoryDomain = CategoryDomain.POLL,
    ) -> EffectiveCategory | None:
        """Resolve the effective permissions and status of a category.

        Args:
            category_id: Category to resolve
            domain: Domain the caller expects the category to belong to

        Returns:
            Effective values, or None if the category is missing or belongs
            to another domain
        """
        with logfire.span(
            "inheritance_service.resolve_effective",
            category_id=str(category_id),
            domain=domain.value,
        ):
            category = await self.category_repository.find_by_id(category_id)
            if category is None or category.domain != domain:
                logfire.info(
                    "Category not resolvable",
                    category_id=str(category_id),
                    domain=domain.value,
                )
                return None

            if category.is_parent:
                return EffectiveCategory(
                    category_id=category.id,
                    claimable=category.claimable_default,
                    request_allowed=category.request_allowed_default,
                    admin_curated=category.admin_curated_default,
                    status=category.status,
                )

            parent = None
            if category.parent_id is not None:
                parent = await self.category_repository.find_by_id(category.parent_id)

            if parent is None:
                # Orphaned child: own overrides, fail closed on the rest
                logfire.warn("Orphaned child category", category_id=str(category.id))
                return EffectiveCategory(
                    category_id=category.id,
                    claimable=YesNo(category.claimable.resolve(YesNo.NO)),
                    request_allowed=YesNo(category.request_allowed.resolve(YesNo.NO)),
                    admin_curated=AdminCurated(
                        category.admin_curated.resolve(AdminCurated.NO)
                    ),
                    status=category.status,
                )

            return self._resolve_child(category, parent)

    def _resolve_child(self, child: Category, parent: Category) -> EffectiveCategory:
        status = (
            CategoryStatus.DISABLED
            if parent.status == CategoryStatus.DISABLED
            else child.status
        )
        return EffectiveCategory(
            category_id=child.id,
            claimable=YesNo(child.claimable.resolve(parent.claimable_default)),
            request_allowed=YesNo(
                child.request_allowed.resolve(parent.request_allowed_default)
            ),
            admin_curated=AdminCurated(
                child.admin_curated.resolve(parent.admin_curated_default)
            ),
            status=status,
        )

    async def preview_impact(
        self,
        parent_id: CategoryId,
        defaults: ParentDefaults,
        domain: CategoryDomain = CategoryDomain.POLL,
    ) -> ImpactPreview:
        """Report which children a change of parent defaults would reach.

        A child counts as impacted as soon as it inherits at least one
        permission, whether or not the new defaults differ from the current ones.

        Args:
            parent_id: Parent category
            defaults: Hypothetical new defaults
            domain: Domain of the children to scan

        Returns:
            Impacted child count and up to 10 of their IDs
        """
        with logfire.span(
            "inheritance_service.preview_impact",
            parent_id=str(parent_id),
            defaults=defaults.model_dump(mode="json", exclude_none=True),
        ):
            children = await self.category_repository.find_children(
                parent_id,
                domain=domain,
                statuses=(CategoryStatus.ACTIVE, CategoryStatus.DISABLED),
            )
            impacted = [child.id for child in children if child.inherits_any()]

            logfire.info(
                "Impact previewed",
                parent_id=str(parent_id),
                scanned=len(children),
                impacted=len(impacted),
            )
            return ImpactPreview(
                parent_id=parent_id,
                affected_child_count=len(impacted),
                affected_child_ids=impacted[:MAX_IMPACT_IDS],
            )
