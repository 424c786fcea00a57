"""Domain layer DI providers."""

from dishka import Scope, provide

from pulse.config import AuthSettings, PsiSettings
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
from pulse.domain.service import (
    CategoryGate,
    CategoryService,
    Clock,
    InheritanceService,
    InviteService,
    JWTService,
    PollConfigService,
    PollService,
    ProfileService,
    PsiService,
    UserPollService,
    VoteAuditLog,
    VoteService,
)
from pulse.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_inheritance_service(
        self, category_repository: CategoryRepository
    ) -> InheritanceService:
        """Provide category inheritance resolver."""
        return InheritanceService(category_repository=category_repository)

    @provide
    def get_category_gate(
        self,
        category_repository: CategoryRepository,
        inheritance_service: InheritanceService,
    ) -> CategoryGate:
        """Provide the category check shared by poll creation paths."""
        return CategoryGate(
            category_repository=category_repository,
            inheritance_service=inheritance_service,
        )

    @provide
    def get_category_service(
        self,
        category_repository: CategoryRepository,
        inheritance_service: InheritanceService,
        clock: Clock,
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(
            category_repository=category_repository,
            inheritance_service=inheritance_service,
            clock=clock,
        )

    @provide
    def get_poll_config_service(
        self,
        poll_config_repository: PollConfigRepository,
        category_repository: CategoryRepository,
        clock: Clock,
    ) -> PollConfigService:
        """Provide poll config domain service."""
        return PollConfigService(
            poll_config_repository=poll_config_repository,
            category_repository=category_repository,
            clock=clock,
        )

    @provide
    def get_poll_service(
        self,
        poll_repository: PollRepository,
        poll_invite_repository: PollInviteRepository,
        poll_config_repository: PollConfigRepository,
        category_gate: CategoryGate,
        inheritance_service: InheritanceService,
        clock: Clock,
    ) -> PollService:
        """Provide admin poll domain service."""
        return PollService(
            poll_repository=poll_repository,
            poll_invite_repository=poll_invite_repository,
            poll_config_repository=poll_config_repository,
            category_gate=category_gate,
            inheritance_service=inheritance_service,
            clock=clock,
        )

    @provide
    def get_vote_audit_log(self) -> VoteAuditLog:
        """Provide vote audit trail."""
        return VoteAuditLog()

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        poll_repository: PollRepository,
        poll_config_repository: PollConfigRepository,
        poll_invite_repository: PollInviteRepository,
        transaction_manager: TransactionManager,
        audit_log: VoteAuditLog,
        clock: Clock,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            poll_repository=poll_repository,
            poll_config_repository=poll_config_repository,
            poll_invite_repository=poll_invite_repository,
            transaction_manager=transaction_manager,
            audit_log=audit_log,
            clock=clock,
        )

    @provide
    def get_user_poll_service(
        self,
        user_poll_repository: UserPollRepository,
        user_poll_invite_repository: UserPollInviteRepository,
        invite_group_repository: InviteGroupRepository,
        category_gate: CategoryGate,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> UserPollService:
        """Provide user poll domain service."""
        return UserPollService(
            user_poll_repository=user_poll_repository,
            user_poll_invite_repository=user_poll_invite_repository,
            invite_group_repository=invite_group_repository,
            category_gate=category_gate,
            transaction_manager=transaction_manager,
            clock=clock,
        )

    @provide
    def get_invite_service(
        self,
        user_poll_invite_repository: UserPollInviteRepository,
        user_poll_repository: UserPollRepository,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> InviteService:
        """Provide invite lifecycle domain service."""
        return InviteService(
            user_poll_invite_repository=user_poll_invite_repository,
            user_poll_repository=user_poll_repository,
            transaction_manager=transaction_manager,
            clock=clock,
        )

    @provide
    def get_psi_service(
        self,
        psi_vote_repository: PsiVoteRepository,
        profile_repository: ProfileRepository,
        user_repository: UserRepository,
        category_repository: CategoryRepository,
        psi_settings: PsiSettings,
        clock: Clock,
    ) -> PsiService:
        """Provide PSI domain service."""
        return PsiService(
            psi_vote_repository=psi_vote_repository,
            profile_repository=profile_repository,
            user_repository=user_repository,
            category_repository=category_repository,
            psi_settings=psi_settings,
            clock=clock,
        )

    @provide
    def get_profile_service(
        self,
        profile_repository: ProfileRepository,
        profile_claim_repository: ProfileClaimRepository,
        profile_request_repository: ProfileRequestRepository,
        category_repository: CategoryRepository,
        user_repository: UserRepository,
        inheritance_service: InheritanceService,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository,
            profile_claim_repository=profile_claim_repository,
            profile_request_repository=profile_request_repository,
            category_repository=category_repository,
            user_repository=user_repository,
            inheritance_service=inheritance_service,
            transaction_manager=transaction_manager,
            clock=clock,
        )
