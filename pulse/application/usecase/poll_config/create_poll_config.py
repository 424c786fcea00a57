"""Create poll config use case."""

from pulse.domain.service import PollConfigDraft, PollConfigService

from ..base import BaseUseCase
from .common import PollConfigResponse


class CreatePollConfigRequest(PollConfigDraft):
    """Create poll config request."""


class CreatePollConfigUseCase(BaseUseCase):
    """Use case for creating a poll template."""

    def __init__(self, poll_config_service: PollConfigService) -> None:
        """Initialize create poll config use case.

        Args:
            poll_config_service: Poll config domain service
        """
        self.poll_config_service = poll_config_service

    async def execute(self, request: CreatePollConfigRequest) -> PollConfigResponse:
        """Create the config at version 1 with a unique slug.

        Raises:
            ValidationError: INVALID_TEMPLATE_RULES
            NotFoundError: CATEGORY_NOT_FOUND
            BusinessRuleViolationError: CATEGORY_NOT_CHILD, CATEGORY_NOT_ACTIVE
        """
        config = await self.poll_config_service.create(request)
        return PollConfigResponse.from_config(config)
