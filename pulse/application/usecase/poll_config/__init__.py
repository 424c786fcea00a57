"""Poll config use cases."""

from .clone_poll_config import ClonePollConfigUseCase
from .common import PollConfigIdRequest, PollConfigResponse
from .create_poll_config import CreatePollConfigRequest, CreatePollConfigUseCase
from .get_poll_config import GetPollConfigUseCase
from .publish_poll_config import PublishPollConfigUseCase
from .update_poll_config import UpdatePollConfigRequest, UpdatePollConfigUseCase

__all__ = [
    "ClonePollConfigUseCase",
    "CreatePollConfigRequest",
    "CreatePollConfigUseCase",
    "GetPollConfigUseCase",
    "PollConfigIdRequest",
    "PollConfigResponse",
    "PublishPollConfigUseCase",
    "UpdatePollConfigRequest",
    "UpdatePollConfigUseCase",
]
