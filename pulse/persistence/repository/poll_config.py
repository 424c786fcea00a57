"""PostgreSQL implementation of PollConfig repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pulse.domain.model import PollConfig
from pulse.domain.repository import PollConfigRepository
from pulse.domain.value import PollConfigId, Slug
from pulse.persistence.mappers import poll_config_to_dict, row_to_poll_config
from pulse.persistence.tables import poll_configs_table


class PostgresPollConfigRepository(PollConfigRepository):
    """PostgreSQL implementation of PollConfigRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, config_id: PollConfigId) -> Optional[PollConfig]:
        """Find a poll config by ID."""
        stmt = select(poll_configs_table).where(poll_configs_table.c.id == config_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_poll_config(dict(row)) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[PollConfig]:
        """Find a poll config by slug."""
        stmt = select(poll_configs_table).where(poll_configs_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_poll_config(dict(row)) if row else None

    async def save(self, config: PollConfig) -> PollConfig:
        """Save a poll config (create or update)."""
        config_dict = poll_config_to_dict(config)

        existing = await self.find_by_id(config.id)
        if existing:
            stmt = (
                update(poll_configs_table)
                .where(poll_configs_table.c.id == config.id)
                .values(**config_dict)
            )
        else:
            stmt = insert(poll_configs_table).values(**config_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return config
