"""User entity.

Users are registered and verified by the external identity service; the core
only reads their role and verification state.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pulse.domain.model.common import DomainModel, utc_now
from pulse.domain.value import UserId, UserRole


class User(DomainModel):
    """User entity."""

    id: UserId
    mobile: Optional[str] = None
    role: UserRole = UserRole.USER
    is_verified: bool = False
    created_at: datetime = Field(default_factory=utc_now)
