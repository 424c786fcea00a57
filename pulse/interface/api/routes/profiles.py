"""Profile, claim and profile request routes.

Submitting needs an authenticated caller; creating profiles and reviewing
claims and requests need the admin role.
"""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field

from pulse.application.usecase.profile import (
    ApproveClaimUseCase,
    ApproveProfileRequestUseCase,
    ClaimResponse,
    CreateProfileRequest,
    CreateProfileUseCase,
    ProfileRequestResponse,
    ProfileResponse,
    RejectClaimUseCase,
    RejectionRequest,
    RejectProfileRequestUseCase,
    ReviewRequest,
    SubmitClaimRequest,
    SubmitClaimUseCase,
    SubmitProfileRequestRequest,
    SubmitProfileRequestUseCase,
)
from pulse.domain.service import JWTService
from pulse.interface.api.auth import require_admin, require_identity

router = APIRouter(tags=["profiles"], route_class=DishkaRoute)


class SubmitClaimAPIRequest(BaseModel):
    """API request for claiming a profile."""

    submitted_data: dict[str, Any] = Field(default_factory=dict)


class SubmitProfileRequestAPIRequest(BaseModel):
    """API request for asking for a new profile."""

    category_id: str
    requested_name: str = Field(min_length=1, max_length=200)
    submitted_data: dict[str, Any] = Field(default_factory=dict)


class RejectAPIRequest(BaseModel):
    """API request for rejecting a claim or request."""

    reason: str = Field(min_length=1, max_length=1000)


@router.post(
    "/profiles", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED
)
async def create_profile(
    request: CreateProfileRequest,
    create_profile_use_case: FromDishka[CreateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ProfileResponse:
    require_admin(jwt_service, auth_token, authorization)
    return await create_profile_use_case.execute(request)


@router.post(
    "/profiles/{profile_id}/claims",
    response_model=ClaimResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_claim(
    profile_id: str,
    request: SubmitClaimAPIRequest,
    submit_claim_use_case: FromDishka[SubmitClaimUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ClaimResponse:
    """Claim ownership of a profile."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await submit_claim_use_case.execute(
        SubmitClaimRequest(
            profile_id=profile_id,
            user_id=identity.user_id,
            submitted_data=request.submitted_data,
        )
    )


@router.post("/claims/{claim_id}/approve", response_model=ClaimResponse)
async def approve_claim(
    claim_id: str,
    approve_claim_use_case: FromDishka[ApproveClaimUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ClaimResponse:
    """Approve a claim; rival pending claims are rejected."""
    admin = require_admin(jwt_service, auth_token, authorization)
    return await approve_claim_use_case.execute(
        ReviewRequest(target_id=claim_id, admin_id=admin.user_id)
    )


@router.post("/claims/{claim_id}/reject", response_model=ClaimResponse)
async def reject_claim(
    claim_id: str,
    request: RejectAPIRequest,
    reject_claim_use_case: FromDishka[RejectClaimUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ClaimResponse:
    admin = require_admin(jwt_service, auth_token, authorization)
    return await reject_claim_use_case.execute(
        RejectionRequest(
            target_id=claim_id, admin_id=admin.user_id, reason=request.reason
        )
    )


@router.post(
    "/profile-requests",
    response_model=ProfileRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_profile_request(
    request: SubmitProfileRequestAPIRequest,
    submit_profile_request_use_case: FromDishka[SubmitProfileRequestUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ProfileRequestResponse:
    """Ask for a profile that does not exist yet."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await submit_profile_request_use_case.execute(
        SubmitProfileRequestRequest(
            category_id=request.category_id,
            requested_name=request.requested_name,
            user_id=identity.user_id,
            submitted_data=request.submitted_data,
        )
    )


@router.post(
    "/profile-requests/{request_id}/approve", response_model=ProfileRequestResponse
)
async def approve_profile_request(
    request_id: str,
    approve_profile_request_use_case: FromDishka[ApproveProfileRequestUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ProfileRequestResponse:
    """Approve a request, creating its profile."""
    admin = require_admin(jwt_service, auth_token, authorization)
    return await approve_profile_request_use_case.execute(
        ReviewRequest(target_id=request_id, admin_id=admin.user_id)
    )


@router.post(
    "/profile-requests/{request_id}/reject", response_model=ProfileRequestResponse
)
async def reject_profile_request(
    request_id: str,
    request: RejectAPIRequest,
    reject_profile_request_use_case: FromDishka[RejectProfileRequestUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ProfileRequestResponse:
    admin = require_admin(jwt_service, auth_token, authorization)
    return await reject_profile_request_use_case.execute(
        RejectionRequest(
            target_id=request_id, admin_id=admin.user_id, reason=request.reason
        )
    )
