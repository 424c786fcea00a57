"""PollConfig entity.

A poll config is a reusable template: UI template, theme, rules and
permissions. Only an ACTIVE config may back a published poll.
"""

from datetime import datetime

from pydantic import Field

from pulse.domain.model.common import DomainModel, utc_now
from pulse.domain.value import (
    CategoryId,
    PollConfigId,
    PollConfigStatus,
    PollPermissions,
    PollRules,
    PollTheme,
    PollUiTemplate,
    Slug,
)


class PollConfig(DomainModel):
    """Poll template entity.

    ``version`` is incremented on every update and publish.
    """

    id: PollConfigId
    name: str
    slug: Slug
    category_id: CategoryId
    status: PollConfigStatus = PollConfigStatus.DRAFT
    version: int = Field(default=1, ge=1)
    ui_template: PollUiTemplate
    theme: PollTheme
    rules: PollRules = Field(default_factory=PollRules)
    permissions: PollPermissions = Field(default_factory=PollPermissions)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def invite_only(self) -> bool:
        return self.permissions.invite_only is True
