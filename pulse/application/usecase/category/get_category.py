"""Get category use case."""

from pydantic import BaseModel

from pulse.domain.service import CategoryService
from pulse.domain.value import CategoryId

from ..base import BaseUseCase, parse_id
from .common import CategoryResponse, EffectiveCategoryResponse


class GetCategoryRequest(BaseModel):
    """Get category request."""

    category_id: str  # UUID string


class GetCategoryResponse(BaseModel):
    """Category with its effective values."""

    category: CategoryResponse
    effective: EffectiveCategoryResponse


class GetCategoryUseCase(BaseUseCase):
    """Use case for reading a category and its resolved permissions."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: GetCategoryRequest) -> GetCategoryResponse:
        """Load a category and resolve it within its own domain.

        Raises:
            NotFoundError: CATEGORY_NOT_FOUND
            ValidationError: INVALID_ID
        """
        category_id = parse_id(request.category_id, CategoryId)
        category = await self.category_service.get_category(category_id)
        effective = await self.category_service.get_effective(
            category_id, category.domain
        )
        return GetCategoryResponse(
            category=CategoryResponse.from_category(category),
            effective=EffectiveCategoryResponse.from_effective(effective),
        )
