"""PostgreSQL implementation of PsiVote repository."""

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from pulse.domain.model import PsiVote
from pulse.domain.repository import PsiVoteRepository
from pulse.domain.value import ProfileId, UserId
from pulse.persistence.mappers import psi_vote_to_dict, row_to_psi_vote
from pulse.persistence.tables import psi_votes_table

_REPLACED_COLUMNS = (
    "weight",
    "trust_integrity",
    "performance_delivery",
    "responsiveness",
    "leadership_ability",
    "created_at",
)


class PostgresPsiVoteRepository(PsiVoteRepository):
    """PostgreSQL implementation of PsiVoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_profile(self, profile_id: ProfileId) -> list[PsiVote]:
        """Find every vote on a profile."""
        stmt = select(psi_votes_table).where(
            psi_votes_table.c.profile_id == profile_id
        )
        result = await self.session.execute(stmt)
        return [row_to_psi_vote(dict(row)) for row in result.mappings().all()]

    async def find_all(self) -> list[PsiVote]:
        """Find every PSI vote."""
        result = await self.session.execute(select(psi_votes_table))
        return [row_to_psi_vote(dict(row)) for row in result.mappings().all()]

    async def count_distinct_profiles_by_user(self, user_id: UserId) -> int:
        """Count the distinct profiles a user has rated."""
        stmt = select(
            func.count(func.distinct(psi_votes_table.c.profile_id))
        ).where(psi_votes_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def upsert(self, vote: PsiVote) -> PsiVote:
        """Insert the vote, or replace the voter's row on (profile, user)."""
        stmt = pg_insert(psi_votes_table).values(**psi_vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            constraint="unique_psi_vote",
            set_={column: stmt.excluded[column] for column in _REPLACED_COLUMNS},
        ).returning(*psi_votes_table.c)
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_psi_vote(dict(row))
