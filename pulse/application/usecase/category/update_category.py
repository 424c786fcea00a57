"""Update category use case."""

from pydantic import BaseModel

from pulse.domain.service import CategoryChanges, CategoryService
from pulse.domain.value import CategoryId

from ..base import BaseUseCase, parse_id
from .common import CategoryResponse


class UpdateCategoryRequest(BaseModel):
    """Update category request."""

    category_id: str  # UUID string
    changes: CategoryChanges


class UpdateCategoryUseCase(BaseUseCase):
    """Use case for a partial category update."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: UpdateCategoryRequest) -> CategoryResponse:
        """Apply the changes.

        Args:
            request: Category ID and the fields to change

        Returns:
            Updated category

        Raises:
            NotFoundError: CATEGORY_NOT_FOUND
            ValidationError: INVALID_ID, INVALID_PARENT
        """
        category = await self.category_service.update_category(
            parse_id(request.category_id, CategoryId), request.changes
        )
        return CategoryResponse.from_category(category)
