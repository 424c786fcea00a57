"""PollConfig repository interface."""

from abc import ABC, abstractmethod

from pulse.domain.model.poll_config import PollConfig
from pulse.domain.value import PollConfigId, Slug


class PollConfigRepository(ABC):
    """Repository for PollConfig entity."""

    @abstractmethod
    async def find_by_id(self, config_id: PollConfigId) -> PollConfig | None:
        """Find a poll config by ID."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> PollConfig | None:
        """Find a poll config by its unique slug.

        Used for slug collision detection.
        """
        pass

    @abstractmethod
    async def save(self, config: PollConfig) -> PollConfig:
        """Save a poll config (create or update).

        Raises:
            IntegrityError: If the slug is already taken by another config
        """
        pass
