"""Update poll config use case."""

from pulse.domain.service import PollConfigChanges, PollConfigService
from pulse.domain.value import PollConfigId

from ..base import BaseUseCase, parse_id
from .common import PollConfigIdRequest, PollConfigResponse


class UpdatePollConfigRequest(PollConfigIdRequest):
    """Update poll config request."""

    changes: PollConfigChanges


class UpdatePollConfigUseCase(BaseUseCase):
    """Use case for updating a poll template. Bumps its version."""

    def __init__(self, poll_config_service: PollConfigService) -> None:
        self.poll_config_service = poll_config_service

    async def execute(self, request: UpdatePollConfigRequest) -> PollConfigResponse:
        config = await self.poll_config_service.update(
            parse_id(request.config_id, PollConfigId), request.changes
        )
        return PollConfigResponse.from_config(config)
