"""Domain value objects for Pulse."""

from pulse.domain.value.identifiers import (
    CategoryId,
    InviteGroupId,
    PollConfigId,
    PollId,
    PollInviteId,
    ProfileClaimId,
    ProfileId,
    ProfileRequestId,
    PsiVoteId,
    UserId,
    UserPollId,
    UserPollInviteId,
    UserPollOptionId,
    VoteId,
)
from pulse.domain.value.types import (
    AdminCurated,
    CategoryDomain,
    CategoryStatus,
    ContentRules,
    Inherit,
    InviteStatus,
    InviteToken,
    Override,
    PollConfigStatus,
    PollPermissions,
    PollRules,
    PollStatus,
    PollTheme,
    PollUiTemplate,
    PollVisibility,
    ProfileStatus,
    PsiRatings,
    ResultsRules,
    ReviewStatus,
    Slug,
    StartMode,
    UserPollStatus,
    UserPollType,
    UserRole,
    VotingBehaviorRules,
    YesNo,
    inheritable,
)

__all__ = [
    # Identifiers
    "UserId",
    "CategoryId",
    "PollConfigId",
    "PollId",
    "PollInviteId",
    "UserPollId",
    "UserPollOptionId",
    "UserPollInviteId",
    "InviteGroupId",
    "VoteId",
    "ProfileId",
    "ProfileClaimId",
    "ProfileRequestId",
    "PsiVoteId",
    # Types
    "AdminCurated",
    "CategoryDomain",
    "CategoryStatus",
    "ContentRules",
    "Inherit",
    "InviteStatus",
    "InviteToken",
    "Override",
    "PollConfigStatus",
    "PollPermissions",
    "PollRules",
    "PollStatus",
    "PollTheme",
    "PollUiTemplate",
    "PollVisibility",
    "ProfileStatus",
    "PsiRatings",
    "ResultsRules",
    "ReviewStatus",
    "Slug",
    "StartMode",
    "UserPollStatus",
    "UserPollType",
    "UserRole",
    "VotingBehaviorRules",
    "YesNo",
    "inheritable",
]
