"""Shared category DTOs."""

from datetime import datetime

from pydantic import BaseModel

from pulse.domain.model import Category
from pulse.domain.service import EffectiveCategory
from pulse.domain.value import AdminCurated, CategoryDomain, CategoryStatus, YesNo


class CategoryResponse(BaseModel):
    """Category as stored. ``None`` overrides are inherited from the parent."""

    category_id: str
    name: str
    domain: CategoryDomain
    is_parent: bool
    parent_id: str | None
    status: CategoryStatus
    claimable: YesNo | None
    request_allowed: YesNo | None
    admin_curated: AdminCurated | None
    claimable_default: YesNo
    request_allowed_default: YesNo
    admin_curated_default: AdminCurated
    display_order: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_category(cls, category: Category) -> "CategoryResponse":
        return cls(
            category_id=str(category.id),
            name=category.name,
            domain=category.domain,
            is_parent=category.is_parent,
            parent_id=str(category.parent_id) if category.parent_id else None,
            status=category.status,
            claimable=category.claimable.to_nullable(),
            request_allowed=category.request_allowed.to_nullable(),
            admin_curated=category.admin_curated.to_nullable(),
            claimable_default=category.claimable_default,
            request_allowed_default=category.request_allowed_default,
            admin_curated_default=category.admin_curated_default,
            display_order=category.display_order,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


class EffectiveCategoryResponse(BaseModel):
    """Resolved category values after inheritance."""

    claimable: YesNo
    request_allowed: YesNo
    admin_curated: AdminCurated
    status: CategoryStatus

    @classmethod
    def from_effective(cls, effective: EffectiveCategory) -> "EffectiveCategoryResponse":
        return cls(
            claimable=effective.claimable,
            request_allowed=effective.request_allowed,
            admin_curated=effective.admin_curated,
            status=effective.status,
        )
