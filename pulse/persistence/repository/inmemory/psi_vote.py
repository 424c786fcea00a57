"""In-memory PSI vote repository for testing."""

from pulse.domain.model import PsiVote
from pulse.domain.repository import PsiVoteRepository
from pulse.domain.value import ProfileId, UserId

from .base import InMemoryRepository


class InMemoryPsiVoteRepository(InMemoryRepository, PsiVoteRepository):
    """In-memory implementation of PsiVoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[tuple[ProfileId, UserId], PsiVote] = {}

    async def find_by_profile(self, profile_id: ProfileId) -> list[PsiVote]:
        """Find every vote on a profile."""
        return [v for v in self._votes.values() if v.profile_id == profile_id]

    async def find_all(self) -> list[PsiVote]:
        """Find every PSI vote."""
        return list(self._votes.values())

    async def count_distinct_profiles_by_user(self, user_id: UserId) -> int:
        """Count the distinct profiles a user has rated."""
        return len({v.profile_id for v in self._votes.values() if v.user_id == user_id})

    async def upsert(self, vote: PsiVote) -> PsiVote:
        """Insert the vote, or replace the voter's row keeping its ID."""
        key = (vote.profile_id, vote.user_id)
        existing = self._votes.get(key)
        if existing is not None:
            vote = vote.model_copy(update={"id": existing.id})
        self._votes[key] = vote
        return vote
