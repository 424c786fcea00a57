"""Category entity.

Categories form a two-level tree per domain: parents carry the defaults,
children may override each permission or inherit it from their parent.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pulse.domain.model.common import DomainModel, utc_now
from pulse.domain.value import (
    AdminCurated,
    CategoryDomain,
    CategoryId,
    CategoryStatus,
    Inherit,
    Override,
    YesNo,
)


class Category(DomainModel):
    """Category entity.

    Business rules:
    - Parents carry ``*_default`` fields that children inherit
    - A child override of ``Inherit()`` means "use the parent default"
    - A child of a disabled parent is effectively disabled
    - A parent cannot be deleted while children exist
    """

    id: CategoryId
    name: str
    domain: CategoryDomain = CategoryDomain.POLL
    is_parent: bool
    parent_id: Optional[CategoryId] = None
    status: CategoryStatus = CategoryStatus.ACTIVE

    # Child overrides
    claimable: Override | Inherit = Field(default_factory=Inherit)
    request_allowed: Override | Inherit = Field(default_factory=Inherit)
    admin_curated: Override | Inherit = Field(default_factory=Inherit)

    # Parent defaults
    claimable_default: YesNo = YesNo.NO
    request_allowed_default: YesNo = YesNo.NO
    admin_curated_default: AdminCurated = AdminCurated.NO

    display_order: int = 0
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def inherits_any(self) -> bool:
        """True if at least one permission is currently inherited."""
        return any(
            isinstance(field, Inherit)
            for field in (self.claimable, self.request_allowed, self.admin_curated)
        )
