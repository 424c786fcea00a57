"""Profile use cases."""

from .claims import (
    ApproveClaimUseCase,
    RejectClaimUseCase,
    SubmitClaimRequest,
    SubmitClaimUseCase,
)
from .common import (
    ClaimResponse,
    ProfileRequestResponse,
    ProfileResponse,
    RejectionRequest,
    ReviewRequest,
)
from .create_profile import CreateProfileRequest, CreateProfileUseCase
from .requests import (
    ApproveProfileRequestUseCase,
    RejectProfileRequestUseCase,
    SubmitProfileRequestRequest,
    SubmitProfileRequestUseCase,
)

__all__ = [
    "ApproveClaimUseCase",
    "ApproveProfileRequestUseCase",
    "ClaimResponse",
    "CreateProfileRequest",
    "CreateProfileUseCase",
    "ProfileRequestResponse",
    "ProfileResponse",
    "RejectClaimUseCase",
    "RejectProfileRequestUseCase",
    "RejectionRequest",
    "ReviewRequest",
    "SubmitClaimRequest",
    "SubmitClaimUseCase",
    "SubmitProfileRequestRequest",
    "SubmitProfileRequestUseCase",
]
