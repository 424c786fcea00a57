"""Admin poll use cases."""

from .close_poll import ClosePollUseCase
from .common import PollIdRequest, PollResponse
from .create_poll import CreatePollRequest, CreatePollUseCase
from .get_poll import GetPollResponse, GetPollUseCase
from .issue_invites import (
    IssueInvitesRequest,
    IssueInvitesResponse,
    IssueInvitesUseCase,
    PollInviteItem,
)
from .list_feed import ListFeedResponse, ListFeedUseCase
from .publish_poll import PublishPollUseCase
from .update_poll import UpdatePollRequest, UpdatePollUseCase

__all__ = [
    "ClosePollUseCase",
    "CreatePollRequest",
    "CreatePollUseCase",
    "GetPollResponse",
    "GetPollUseCase",
    "IssueInvitesRequest",
    "IssueInvitesResponse",
    "IssueInvitesUseCase",
    "ListFeedResponse",
    "ListFeedUseCase",
    "PollIdRequest",
    "PollInviteItem",
    "PollResponse",
    "PublishPollUseCase",
    "UpdatePollRequest",
    "UpdatePollUseCase",
]
