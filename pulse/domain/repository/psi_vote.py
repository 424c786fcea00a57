"""PSI vote repository interface."""

from abc import ABC, abstractmethod

from pulse.domain.model.psi_vote import PsiVote
from pulse.domain.value import ProfileId, UserId


class PsiVoteRepository(ABC):
    """Repository for PsiVote entity.

    Storage holds one row per (profile, user).
    """

    @abstractmethod
    async def find_by_profile(self, profile_id: ProfileId) -> list[PsiVote]:
        """Find every current vote on a profile."""
        pass

    @abstractmethod
    async def find_all(self) -> list[PsiVote]:
        """Find every PSI vote. Used by the single-pass trending aggregation."""
        pass

    @abstractmethod
    async def count_distinct_profiles_by_user(self, user_id: UserId) -> int:
        """Count the distinct profiles a user has rated.

        Args:
            user_id: Voter

        Returns:
            Number of distinct profiles with a vote from this user
        """
        pass

    @abstractmethod
    async def upsert(self, vote: PsiVote) -> PsiVote:
        """Insert the vote, or fully replace the voter's existing row.

        On conflict on (profile, user) the existing row keeps its ID and takes
        the new weight, ratings and timestamp.

        Returns:
            The stored vote
        """
        pass
