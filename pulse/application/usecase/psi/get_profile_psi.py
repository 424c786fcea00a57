"""Get profile PSI use case."""

from pydantic import BaseModel

from pulse.domain.service import PsiService
from pulse.domain.value import ProfileId

from ..base import BaseUseCase, parse_id
from .common import PsiScoreResponse


class GetProfilePsiRequest(BaseModel):
    """Get profile PSI request."""

    profile_id: str  # UUID string


class GetProfilePsiUseCase(BaseUseCase):
    """Use case for reading a profile's PSI."""

    def __init__(self, psi_service: PsiService) -> None:
        self.psi_service = psi_service

    async def execute(self, request: GetProfilePsiRequest) -> PsiScoreResponse:
        score = await self.psi_service.get_profile_psi(
            parse_id(request.profile_id, ProfileId)
        )
        return PsiScoreResponse.from_score(score)
