"""Preview impact use case."""

from pydantic import BaseModel

from pulse.domain.service import CategoryService, ParentDefaults
from pulse.domain.value import CategoryId

from ..base import BaseUseCase, parse_id


class PreviewImpactRequest(BaseModel):
    """Preview impact request."""

    parent_id: str  # UUID string
    defaults: ParentDefaults


class PreviewImpactResponse(BaseModel):
    """Children reached by a change of parent defaults."""

    parent_id: str
    affected_child_count: int
    affected_child_ids: list[str]  # At most 10


class PreviewImpactUseCase(BaseUseCase):
    """Use case for previewing a change of parent defaults."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: PreviewImpactRequest) -> PreviewImpactResponse:
        preview = await self.category_service.preview_impact(
            parse_id(request.parent_id, CategoryId), request.defaults
        )
        return PreviewImpactResponse(
            parent_id=str(preview.parent_id),
            affected_child_count=preview.affected_child_count,
            affected_child_ids=[str(child) for child in preview.affected_child_ids],
        )
