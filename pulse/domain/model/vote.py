"""Vote entity.

A vote is bound to a user, an invite, or both. Each facet is unique per poll.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from pulse.domain.model.common import DomainModel, utc_now
from pulse.domain.value import PollConfigId, PollId, PollInviteId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per (poll, user) and per (poll, invite)
      (enforced by database unique constraints as well as by the engine)
    - ``response`` is opaque, shape-checked against the poll config at cast time
    """

    id: VoteId
    poll_id: PollId
    poll_config_id: PollConfigId
    user_id: Optional[UserId] = None
    invite_id: Optional[PollInviteId] = None
    response: dict[str, Any]
    created_at: datetime = Field(default_factory=utc_now)
