"""Invite use cases."""

from .accept_invite import AcceptInviteRequest, AcceptInviteUseCase
from .common import InvitePollSummary, InviteResponse, InviteTokenRequest
from .reject_invite import RejectInviteUseCase
from .validate_invite import ValidateInviteUseCase

__all__ = [
    "AcceptInviteRequest",
    "AcceptInviteUseCase",
    "InvitePollSummary",
    "InviteResponse",
    "InviteTokenRequest",
    "RejectInviteUseCase",
    "ValidateInviteUseCase",
]
