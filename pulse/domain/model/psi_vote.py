"""PSI vote entity."""

from datetime import datetime

from pydantic import Field

from pulse.domain.model.common import DomainModel, utc_now
from pulse.domain.value import ProfileId, PsiRatings, PsiVoteId, UserId


class PsiVote(DomainModel):
    """One voter's current PSI ratings of a profile.

    One row per (profile, user); a later vote replaces the earlier one,
    including its weight and timestamp.
    """

    id: PsiVoteId
    profile_id: ProfileId
    user_id: UserId
    weight: float = Field(ge=0)
    ratings: PsiRatings
    created_at: datetime = Field(default_factory=utc_now)
