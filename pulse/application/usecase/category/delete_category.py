"""Delete category use case."""

from pydantic import BaseModel

from pulse.domain.service import CategoryService
from pulse.domain.value import CategoryId

from ..base import BaseUseCase, parse_id


class DeleteCategoryRequest(BaseModel):
    """Delete category request."""

    category_id: str  # UUID string


class DeleteCategoryResponse(BaseModel):
    """Delete category response."""

    success: bool


class DeleteCategoryUseCase(BaseUseCase):
    """Use case for deleting a category without children."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: DeleteCategoryRequest) -> DeleteCategoryResponse:
        await self.category_service.delete_category(
            parse_id(request.category_id, CategoryId)
        )
        return DeleteCategoryResponse(success=True)
