"""In-memory poll config repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from pulse.domain.model import PollConfig
from pulse.domain.repository import PollConfigRepository
from pulse.domain.value import PollConfigId, Slug

from .base import InMemoryRepository


class InMemoryPollConfigRepository(InMemoryRepository, PollConfigRepository):
    """In-memory implementation of PollConfigRepository for testing."""

    def __init__(self) -> None:
        self._configs: dict[PollConfigId, PollConfig] = {}

    async def find_by_id(self, config_id: PollConfigId) -> Optional[PollConfig]:
        """Find a poll config by ID."""
        return self._configs.get(config_id)

    async def find_by_slug(self, slug: Slug) -> Optional[PollConfig]:
        """Find a poll config by slug."""
        for config in self._configs.values():
            if config.slug == slug:
                return config
        return None

    async def save(self, config: PollConfig) -> PollConfig:
        """Save a poll config (create or update).

        Raises:
            IntegrityError: If another config already uses the slug
        """
        existing = await self.find_by_slug(config.slug)
        if existing and existing.id != config.id:
            raise IntegrityError("Duplicate poll config slug", None, Exception())

        self._configs[config.id] = config
        return config
