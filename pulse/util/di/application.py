"""Application layer DI providers."""

from dishka import Scope, provide

from pulse.application.usecase.category import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    PreviewImpactUseCase,
    UpdateCategoryUseCase,
)
from pulse.application.usecase.invite import (
    AcceptInviteUseCase,
    RejectInviteUseCase,
    ValidateInviteUseCase,
)
from pulse.application.usecase.poll import (
    ClosePollUseCase,
    CreatePollUseCase,
    GetPollUseCase,
    IssueInvitesUseCase,
    ListFeedUseCase,
    PublishPollUseCase,
    UpdatePollUseCase,
)
from pulse.application.usecase.poll_config import (
    ClonePollConfigUseCase,
    CreatePollConfigUseCase,
    GetPollConfigUseCase,
    PublishPollConfigUseCase,
    UpdatePollConfigUseCase,
)
from pulse.application.usecase.profile import (
    ApproveClaimUseCase,
    ApproveProfileRequestUseCase,
    CreateProfileUseCase,
    RejectClaimUseCase,
    RejectProfileRequestUseCase,
    SubmitClaimUseCase,
    SubmitProfileRequestUseCase,
)
from pulse.application.usecase.psi import (
    GetProfilePsiUseCase,
    ListTrendingUseCase,
    SubmitPsiVoteUseCase,
)
from pulse.application.usecase.user_poll import (
    CreateInvitesUseCase,
    CreateOwnerInviteUseCase,
    CreateUserPollUseCase,
    EndUserPollUseCase,
    ExtendUserPollUseCase,
    GetUserPollUseCase,
    ListGroupsUseCase,
    SaveGroupUseCase,
)
from pulse.application.usecase.vote import CastVoteUseCase
from pulse.config import Settings
from pulse.domain.repository import VoteRepository
from pulse.domain.service import (
    CategoryService,
    Clock,
    InviteService,
    PollConfigService,
    PollService,
    ProfileService,
    PsiService,
    UserPollService,
    VoteService,
)
from pulse.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Category use cases
    @provide(scope=Scope.REQUEST)
    def get_create_category_use_case(
        self, category_service: CategoryService
    ) -> CreateCategoryUseCase:
        """Provide create category use case."""
        return CreateCategoryUseCase(category_service=category_service)

    @provide(scope=Scope.REQUEST)
    def get_update_category_use_case(
        self, category_service: CategoryService
    ) -> UpdateCategoryUseCase:
        """Provide update category use case."""
        return UpdateCategoryUseCase(category_service=category_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_category_use_case(
        self, category_service: CategoryService
    ) -> DeleteCategoryUseCase:
        """Provide delete category use case."""
        return DeleteCategoryUseCase(category_service=category_service)

    @provide(scope=Scope.REQUEST)
    def get_get_category_use_case(
        self, category_service: CategoryService
    ) -> GetCategoryUseCase:
        """Provide get category use case."""
        return GetCategoryUseCase(category_service=category_service)

    @provide(scope=Scope.REQUEST)
    def get_preview_impact_use_case(
        self, category_service: CategoryService
    ) -> PreviewImpactUseCase:
        """Provide preview impact use case."""
        return PreviewImpactUseCase(category_service=category_service)

    # Poll config use cases
    @provide(scope=Scope.REQUEST)
    def get_create_poll_config_use_case(
        self, poll_config_service: PollConfigService
    ) -> CreatePollConfigUseCase:
        """Provide create poll config use case."""
        return CreatePollConfigUseCase(poll_config_service=poll_config_service)

    @provide(scope=Scope.REQUEST)
    def get_update_poll_config_use_case(
        self, poll_config_service: PollConfigService
    ) -> UpdatePollConfigUseCase:
        """Provide update poll config use case."""
        return UpdatePollConfigUseCase(poll_config_service=poll_config_service)

    @provide(scope=Scope.REQUEST)
    def get_publish_poll_config_use_case(
        self, poll_config_service: PollConfigService
    ) -> PublishPollConfigUseCase:
        """Provide publish poll config use case."""
        return PublishPollConfigUseCase(poll_config_service=poll_config_service)

    @provide(scope=Scope.REQUEST)
    def get_clone_poll_config_use_case(
        self, poll_config_service: PollConfigService
    ) -> ClonePollConfigUseCase:
        """Provide clone poll config use case."""
        return ClonePollConfigUseCase(poll_config_service=poll_config_service)

    @provide(scope=Scope.REQUEST)
    def get_get_poll_config_use_case(
        self, poll_config_service: PollConfigService
    ) -> GetPollConfigUseCase:
        """Provide get poll config use case."""
        return GetPollConfigUseCase(poll_config_service=poll_config_service)

    # Admin poll use cases
    @provide(scope=Scope.REQUEST)
    def get_create_poll_use_case(self, poll_service: PollService) -> CreatePollUseCase:
        """Provide create poll use case."""
        return CreatePollUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_update_poll_use_case(self, poll_service: PollService) -> UpdatePollUseCase:
        """Provide update poll use case."""
        return UpdatePollUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_publish_poll_use_case(
        self, poll_service: PollService
    ) -> PublishPollUseCase:
        """Provide publish poll use case."""
        return PublishPollUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_close_poll_use_case(self, poll_service: PollService) -> ClosePollUseCase:
        """Provide close poll use case."""
        return ClosePollUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_get_poll_use_case(
        self, poll_service: PollService, vote_repository: VoteRepository
    ) -> GetPollUseCase:
        """Provide get poll use case."""
        return GetPollUseCase(poll_service=poll_service, vote_repository=vote_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_feed_use_case(self, poll_service: PollService) -> ListFeedUseCase:
        """Provide poll feed use case."""
        return ListFeedUseCase(poll_service=poll_service)

    @provide(scope=Scope.REQUEST)
    def get_issue_invites_use_case(
        self, poll_service: PollService, settings: Settings
    ) -> IssueInvitesUseCase:
        """Provide admin invite issuing use case."""
        return IssueInvitesUseCase(poll_service=poll_service, settings=settings)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # User poll use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_poll_use_case(
        self, user_poll_service: UserPollService, clock: Clock
    ) -> CreateUserPollUseCase:
        """Provide create user poll use case."""
        return CreateUserPollUseCase(user_poll_service=user_poll_service, clock=clock)

    @provide(scope=Scope.REQUEST)
    def get_get_user_poll_use_case(
        self, user_poll_service: UserPollService, clock: Clock
    ) -> GetUserPollUseCase:
        """Provide get user poll use case."""
        return GetUserPollUseCase(user_poll_service=user_poll_service, clock=clock)

    @provide(scope=Scope.REQUEST)
    def get_end_user_poll_use_case(
        self, user_poll_service: UserPollService, clock: Clock
    ) -> EndUserPollUseCase:
        """Provide end user poll use case."""
        return EndUserPollUseCase(user_poll_service=user_poll_service, clock=clock)

    @provide(scope=Scope.REQUEST)
    def get_extend_user_poll_use_case(
        self, user_poll_service: UserPollService, clock: Clock
    ) -> ExtendUserPollUseCase:
        """Provide extend user poll use case."""
        return ExtendUserPollUseCase(user_poll_service=user_poll_service, clock=clock)

    @provide(scope=Scope.REQUEST)
    def get_create_owner_invite_use_case(
        self, user_poll_service: UserPollService, settings: Settings
    ) -> CreateOwnerInviteUseCase:
        """Provide owner invite use case."""
        return CreateOwnerInviteUseCase(
            user_poll_service=user_poll_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_create_invites_use_case(
        self, user_poll_service: UserPollService, settings: Settings
    ) -> CreateInvitesUseCase:
        """Provide bulk invite use case."""
        return CreateInvitesUseCase(
            user_poll_service=user_poll_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_list_groups_use_case(
        self, user_poll_service: UserPollService
    ) -> ListGroupsUseCase:
        """Provide list invite groups use case."""
        return ListGroupsUseCase(user_poll_service=user_poll_service)

    @provide(scope=Scope.REQUEST)
    def get_save_group_use_case(
        self, user_poll_service: UserPollService
    ) -> SaveGroupUseCase:
        """Provide save invite group use case."""
        return SaveGroupUseCase(user_poll_service=user_poll_service)

    # Invite use cases
    @provide(scope=Scope.REQUEST)
    def get_validate_invite_use_case(
        self, invite_service: InviteService, clock: Clock
    ) -> ValidateInviteUseCase:
        """Provide validate invite use case."""
        return ValidateInviteUseCase(invite_service=invite_service, clock=clock)

    @provide(scope=Scope.REQUEST)
    def get_accept_invite_use_case(
        self, invite_service: InviteService, clock: Clock
    ) -> AcceptInviteUseCase:
        """Provide accept invite use case."""
        return AcceptInviteUseCase(invite_service=invite_service, clock=clock)

    @provide(scope=Scope.REQUEST)
    def get_reject_invite_use_case(
        self, invite_service: InviteService, clock: Clock
    ) -> RejectInviteUseCase:
        """Provide reject invite use case."""
        return RejectInviteUseCase(invite_service=invite_service, clock=clock)

    # PSI use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_psi_vote_use_case(
        self, psi_service: PsiService
    ) -> SubmitPsiVoteUseCase:
        """Provide submit PSI vote use case."""
        return SubmitPsiVoteUseCase(psi_service=psi_service)

    @provide(scope=Scope.REQUEST)
    def get_get_profile_psi_use_case(
        self, psi_service: PsiService
    ) -> GetProfilePsiUseCase:
        """Provide profile PSI use case."""
        return GetProfilePsiUseCase(psi_service=psi_service)

    @provide(scope=Scope.REQUEST)
    def get_list_trending_use_case(self, psi_service: PsiService) -> ListTrendingUseCase:
        """Provide trending profiles use case."""
        return ListTrendingUseCase(psi_service=psi_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_create_profile_use_case(
        self, profile_service: ProfileService
    ) -> CreateProfileUseCase:
        """Provide create profile use case."""
        return CreateProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_submit_claim_use_case(
        self, profile_service: ProfileService
    ) -> SubmitClaimUseCase:
        """Provide submit claim use case."""
        return SubmitClaimUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_approve_claim_use_case(
        self, profile_service: ProfileService
    ) -> ApproveClaimUseCase:
        """Provide approve claim use case."""
        return ApproveClaimUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_reject_claim_use_case(
        self, profile_service: ProfileService
    ) -> RejectClaimUseCase:
        """Provide reject claim use case."""
        return RejectClaimUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_submit_profile_request_use_case(
        self, profile_service: ProfileService
    ) -> SubmitProfileRequestUseCase:
        """Provide submit profile request use case."""
        return SubmitProfileRequestUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_approve_profile_request_use_case(
        self, profile_service: ProfileService
    ) -> ApproveProfileRequestUseCase:
        """Provide approve profile request use case."""
        return ApproveProfileRequestUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_reject_profile_request_use_case(
        self, profile_service: ProfileService
    ) -> RejectProfileRequestUseCase:
        """Provide reject profile request use case."""
        return RejectProfileRequestUseCase(profile_service=profile_service)
