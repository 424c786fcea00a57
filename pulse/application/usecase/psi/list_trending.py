"""List trending profiles use case."""

from pydantic import BaseModel, Field

from pulse.domain.service import PsiService

from ..base import BaseUseCase
from .common import TrendingItem


class ListTrendingRequest(BaseModel):
    """List trending request."""

    limit: int | None = Field(default=None, ge=1, le=100)


class ListTrendingResponse(BaseModel):
    """Profiles ranked by PSI, highest first."""

    profiles: list[TrendingItem]


class ListTrendingUseCase(BaseUseCase):
    """Use case for the trending profiles list."""

    def __init__(self, psi_service: PsiService) -> None:
        self.psi_service = psi_service

    async def execute(self, request: ListTrendingRequest) -> ListTrendingResponse:
        entries = await self.psi_service.list_trending(request.limit)
        return ListTrendingResponse(
            profiles=[TrendingItem.from_entry(entry) for entry in entries]
        )
