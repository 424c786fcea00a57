"""Submit PSI vote use case."""

import logfire
from pydantic import BaseModel

from pulse.domain.service import PsiService
from pulse.domain.value import ProfileId, PsiRatings, UserId

from ..base import BaseUseCase, parse_id
from .common import PsiScoreResponse


class SubmitPsiVoteRequest(BaseModel):
    """Submit PSI vote request."""

    profile_id: str  # UUID string
    user_id: str  # Authenticated caller
    ratings: PsiRatings


class SubmitPsiVoteUseCase(BaseUseCase):
    """Use case for rating a profile.

    A repeated vote by the same user replaces the earlier one, so the
    profile's vote count does not grow.
    """

    def __init__(self, psi_service: PsiService) -> None:
        """Initialize submit PSI vote use case.

        Args:
            psi_service: PSI domain service
        """
        self.psi_service = psi_service

    async def execute(self, request: SubmitPsiVoteRequest) -> PsiScoreResponse:
        """Store the ratings and return the recomputed PSI.

        Raises:
            NotFoundError: PROFILE_NOT_FOUND, USER_NOT_FOUND
            ValidationError: INVALID_ID
        """
        profile_id = parse_id(request.profile_id, ProfileId)
        user_id = parse_id(request.user_id, UserId)
        with logfire.span("submit_psi_vote.execute", profile_id=str(profile_id)):
            score = await self.psi_service.submit_vote(
                user_id, profile_id, request.ratings
            )
            return PsiScoreResponse.from_score(score)
