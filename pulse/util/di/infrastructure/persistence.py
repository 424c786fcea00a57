"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pulse.config import Settings
from pulse.domain.repository import (
    CategoryRepository,
    InviteGroupRepository,
    PollConfigRepository,
    PollInviteRepository,
    PollRepository,
    ProfileClaimRepository,
    ProfileRepository,
    ProfileRequestRepository,
    PsiVoteRepository,
    TransactionManager,
    UserPollInviteRepository,
    UserPollRepository,
    UserRepository,
    VoteRepository,
)
from pulse.persistence.database import create_engine, create_session_factory
from pulse.persistence.repository import (
    PostgresCategoryRepository,
    PostgresInviteGroupRepository,
    PostgresPollConfigRepository,
    PostgresPollInviteRepository,
    PostgresPollRepository,
    PostgresProfileClaimRepository,
    PostgresProfileRepository,
    PostgresProfileRequestRepository,
    PostgresPsiVoteRepository,
    PostgresTransactionManager,
    PostgresUserPollInviteRepository,
    PostgresUserPollRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from pulse.util.di.base import ProviderBase
from pulse.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide savepoint-based transaction boundary."""
        return PostgresTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_category_repository(self, session: AsyncSession) -> CategoryRepository:
        """Provide Category repository."""
        return PostgresCategoryRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_poll_config_repository(
        self, session: AsyncSession
    ) -> PollConfigRepository:
        """Provide PollConfig repository."""
        return PostgresPollConfigRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_poll_repository(self, session: AsyncSession) -> PollRepository:
        """Provide Poll repository."""
        return PostgresPollRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_poll_invite_repository(
        self, session: AsyncSession
    ) -> PollInviteRepository:
        """Provide PollInvite repository."""
        return PostgresPollInviteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_poll_repository(self, session: AsyncSession) -> UserPollRepository:
        """Provide UserPoll repository."""
        return PostgresUserPollRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_poll_invite_repository(
        self, session: AsyncSession
    ) -> UserPollInviteRepository:
        """Provide UserPollInvite repository."""
        return PostgresUserPollInviteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invite_group_repository(
        self, session: AsyncSession
    ) -> InviteGroupRepository:
        """Provide InviteGroup repository."""
        return PostgresInviteGroupRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_claim_repository(
        self, session: AsyncSession
    ) -> ProfileClaimRepository:
        """Provide ProfileClaim repository."""
        return PostgresProfileClaimRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_request_repository(
        self, session: AsyncSession
    ) -> ProfileRequestRepository:
        """Provide ProfileRequest repository."""
        return PostgresProfileRequestRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_psi_vote_repository(self, session: AsyncSession) -> PsiVoteRepository:
        """Provide PsiVote repository."""
        return PostgresPsiVoteRepository(session)
