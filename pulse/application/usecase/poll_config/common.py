"""Shared poll config DTOs."""

from datetime import datetime

from pydantic import BaseModel

from pulse.domain.model import PollConfig
from pulse.domain.value import (
    PollConfigStatus,
    PollPermissions,
    PollRules,
    PollTheme,
    PollUiTemplate,
)


class PollConfigResponse(BaseModel):
    """Poll config as stored."""

    config_id: str
    name: str
    slug: str
    category_id: str
    status: PollConfigStatus
    version: int
    ui_template: PollUiTemplate
    theme: PollTheme
    rules: PollRules
    permissions: PollPermissions
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_config(cls, config: PollConfig) -> "PollConfigResponse":
        return cls(
            config_id=str(config.id),
            name=config.name,
            slug=str(config.slug),
            category_id=str(config.category_id),
            status=config.status,
            version=config.version,
            ui_template=config.ui_template,
            theme=config.theme,
            rules=config.rules,
            permissions=config.permissions,
            created_at=config.created_at,
            updated_at=config.updated_at,
        )


class PollConfigIdRequest(BaseModel):
    """Request addressing a single poll config."""

    config_id: str  # UUID string
