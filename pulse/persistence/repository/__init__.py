"""PostgreSQL repository implementations."""

from pulse.persistence.repository.category import PostgresCategoryRepository
from pulse.persistence.repository.invite import (
    PostgresInviteGroupRepository,
    PostgresUserPollInviteRepository,
)
from pulse.persistence.repository.poll import (
    PostgresPollInviteRepository,
    PostgresPollRepository,
)
from pulse.persistence.repository.poll_config import PostgresPollConfigRepository
from pulse.persistence.repository.profile import (
    PostgresProfileClaimRepository,
    PostgresProfileRepository,
    PostgresProfileRequestRepository,
)
from pulse.persistence.repository.psi_vote import PostgresPsiVoteRepository
from pulse.persistence.repository.transaction import PostgresTransactionManager
from pulse.persistence.repository.user import PostgresUserRepository
from pulse.persistence.repository.user_poll import PostgresUserPollRepository
from pulse.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCategoryRepository",
    "PostgresInviteGroupRepository",
    "PostgresPollConfigRepository",
    "PostgresPollInviteRepository",
    "PostgresPollRepository",
    "PostgresProfileClaimRepository",
    "PostgresProfileRepository",
    "PostgresProfileRequestRepository",
    "PostgresPsiVoteRepository",
    "PostgresTransactionManager",
    "PostgresUserPollRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
