"""Shared PSI DTOs."""

from pydantic import BaseModel

from pulse.domain.service import PsiScore, TrendingEntry
from pulse.domain.value import PsiRatings


class PsiScoreResponse(BaseModel):
    """Aggregated PSI of a profile."""

    profile_id: str
    vote_count: int
    overall_score: int
    parameters: PsiRatings

    @classmethod
    def from_score(cls, score: PsiScore) -> "PsiScoreResponse":
        return cls(
            profile_id=str(score.profile_id),
            vote_count=score.vote_count,
            overall_score=score.overall_score,
            parameters=score.parameters,
        )


class TrendingProfileItem(BaseModel):
    """Profile summary of a trending entry."""

    profile_id: str
    name: str
    category_name: str | None


class TrendingItem(PsiScoreResponse):
    """One ranked profile."""

    profile: TrendingProfileItem | None

    @classmethod
    def from_entry(cls, entry: TrendingEntry) -> "TrendingItem":
        profile = entry.profile
        return cls(
            **PsiScoreResponse.from_score(entry).model_dump(),
            profile=(
                TrendingProfileItem(
                    profile_id=str(profile.id),
                    name=profile.name,
                    category_name=profile.category_name,
                )
                if profile is not None
                else None
            ),
        )
