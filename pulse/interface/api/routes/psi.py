"""PSI routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query

from pulse.application.usecase.psi import (
    GetProfilePsiRequest,
    GetProfilePsiUseCase,
    ListTrendingRequest,
    ListTrendingResponse,
    ListTrendingUseCase,
    PsiScoreResponse,
    SubmitPsiVoteRequest,
    SubmitPsiVoteUseCase,
)
from pulse.domain.service import JWTService
from pulse.domain.value import PsiRatings
from pulse.interface.api.auth import require_identity

router = APIRouter(prefix="/psi", tags=["psi"], route_class=DishkaRoute)


@router.get("/trending", response_model=ListTrendingResponse)
async def list_trending(
    list_trending_use_case: FromDishka[ListTrendingUseCase],
    limit: int | None = Query(default=None, ge=1, le=100),
) -> ListTrendingResponse:
    """Profiles ranked by PSI."""
    return await list_trending_use_case.execute(ListTrendingRequest(limit=limit))


@router.get("/profiles/{profile_id}", response_model=PsiScoreResponse)
async def get_profile_psi(
    profile_id: str,
    get_profile_psi_use_case: FromDishka[GetProfilePsiUseCase],
) -> PsiScoreResponse:
    return await get_profile_psi_use_case.execute(
        GetProfilePsiRequest(profile_id=profile_id)
    )


@router.post("/profiles/{profile_id}/vote", response_model=PsiScoreResponse)
async def submit_psi_vote(
    profile_id: str,
    ratings: PsiRatings,
    submit_psi_vote_use_case: FromDishka[SubmitPsiVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PsiScoreResponse:
    """Rate a profile; a repeated vote replaces the caller's earlier one."""
    identity = require_identity(jwt_service, auth_token, authorization)
    return await submit_psi_vote_use_case.execute(
        SubmitPsiVoteRequest(
            profile_id=profile_id, user_id=identity.user_id, ratings=ratings
        )
    )
