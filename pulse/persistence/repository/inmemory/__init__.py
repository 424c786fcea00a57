"""In-memory repository implementations for testing."""

from .base import InMemoryRepository
from .category import InMemoryCategoryRepository
from .invite import InMemoryInviteGroupRepository, InMemoryUserPollInviteRepository
from .poll import InMemoryPollInviteRepository, InMemoryPollRepository
from .poll_config import InMemoryPollConfigRepository
from .profile import (
    InMemoryProfileClaimRepository,
    InMemoryProfileRepository,
    InMemoryProfileRequestRepository,
)
from .psi_vote import InMemoryPsiVoteRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository
from .user_poll import InMemoryUserPollRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryInviteGroupRepository",
    "InMemoryPollConfigRepository",
    "InMemoryPollInviteRepository",
    "InMemoryPollRepository",
    "InMemoryProfileClaimRepository",
    "InMemoryProfileRepository",
    "InMemoryProfileRequestRepository",
    "InMemoryPsiVoteRepository",
    "InMemoryRepository",
    "InMemoryTransactionManager",
    "InMemoryUserPollInviteRepository",
    "InMemoryUserPollRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
