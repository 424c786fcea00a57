"""Domain services."""

from .base import Service
from .category_gate import CategoryGate
from .category_service import CategoryChanges, CategoryDraft, CategoryService
from .clock import Clock, SystemClock
from .inheritance_service import (
    EffectiveCategory,
    ImpactPreview,
    InheritanceService,
    ParentDefaults,
)
from .invite_service import InviteService, InviteWithPoll
from .jwt_service import JWTService
from .poll_config_service import PollConfigChanges, PollConfigDraft, PollConfigService
from .poll_service import PollChanges, PollDraft, PollService
from .profile_service import ProfileService
from .psi_service import PsiScore, PsiService, TrendingEntry, TrendingProfile
from .user_poll_service import (
    InviteTargets,
    NewInviteGroup,
    UserPollDraft,
    UserPollService,
)
from .vote_service import VoteAuditLog, VoteService

__all__ = [
    "CategoryChanges",
    "CategoryDraft",
    "CategoryGate",
    "CategoryService",
    "Clock",
    "EffectiveCategory",
    "ImpactPreview",
    "InheritanceService",
    "InviteService",
    "InviteTargets",
    "InviteWithPoll",
    "JWTService",
    "NewInviteGroup",
    "ParentDefaults",
    "PollChanges",
    "PollConfigChanges",
    "PollConfigDraft",
    "PollConfigService",
    "PollDraft",
    "PollService",
    "ProfileService",
    "PsiScore",
    "PsiService",
    "Service",
    "SystemClock",
    "TrendingEntry",
    "TrendingProfile",
    "UserPollDraft",
    "UserPollService",
    "VoteAuditLog",
    "VoteService",
]
