"""Repository interfaces for Pulse domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from pulse.domain.repository.category import CategoryRepository
from pulse.domain.repository.invite import InviteGroupRepository, UserPollInviteRepository
from pulse.domain.repository.poll import PollInviteRepository, PollRepository
from pulse.domain.repository.poll_config import PollConfigRepository
from pulse.domain.repository.profile import (
    ProfileClaimRepository,
    ProfileRepository,
    ProfileRequestRepository,
)
from pulse.domain.repository.psi_vote import PsiVoteRepository
from pulse.domain.repository.transaction import TransactionManager
from pulse.domain.repository.user import UserRepository
from pulse.domain.repository.user_poll import UserPollRepository
from pulse.domain.repository.vote import VoteRepository

__all__ = [
    "CategoryRepository",
    "InviteGroupRepository",
    "PollConfigRepository",
    "PollInviteRepository",
    "PollRepository",
    "ProfileClaimRepository",
    "ProfileRepository",
    "ProfileRequestRepository",
    "PsiVoteRepository",
    "TransactionManager",
    "UserPollInviteRepository",
    "UserPollRepository",
    "UserRepository",
    "VoteRepository",
]
