"""PSI use cases."""

from .common import PsiScoreResponse, TrendingItem, TrendingProfileItem
from .get_profile_psi import GetProfilePsiRequest, GetProfilePsiUseCase
from .list_trending import ListTrendingRequest, ListTrendingResponse, ListTrendingUseCase
from .submit_psi_vote import SubmitPsiVoteRequest, SubmitPsiVoteUseCase

__all__ = [
    "GetProfilePsiRequest",
    "GetProfilePsiUseCase",
    "ListTrendingRequest",
    "ListTrendingResponse",
    "ListTrendingUseCase",
    "PsiScoreResponse",
    "SubmitPsiVoteRequest",
    "SubmitPsiVoteUseCase",
    "TrendingItem",
    "TrendingProfileItem",
]
