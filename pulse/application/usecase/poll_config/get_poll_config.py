"""Get poll config use case."""

from pulse.domain.service import PollConfigService
from pulse.domain.value import PollConfigId

from ..base import BaseUseCase, parse_id
from .common import PollConfigIdRequest, PollConfigResponse


class GetPollConfigUseCase(BaseUseCase):
    """Use case for reading a poll template."""

    def __init__(self, poll_config_service: PollConfigService) -> None:
        self.poll_config_service = poll_config_service

    async def execute(self, request: PollConfigIdRequest) -> PollConfigResponse:
        config = await self.poll_config_service.get_config(
            parse_id(request.config_id, PollConfigId)
        )
        return PollConfigResponse.from_config(config)
