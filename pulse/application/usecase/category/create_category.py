"""Create category use case."""

import logfire

from pulse.domain.service import CategoryDraft, CategoryService

from ..base import BaseUseCase
from .common import CategoryResponse


class CreateCategoryRequest(CategoryDraft):
    """Create category request."""


class CreateCategoryUseCase(BaseUseCase):
    """Use case for creating a parent or child category."""

    def __init__(self, category_service: CategoryService) -> None:
        """Initialize create category use case.

        Args:
            category_service: Category domain service
        """
        self.category_service = category_service

    async def execute(self, request: CreateCategoryRequest) -> CategoryResponse:
        """Create the category and return it as stored."""
        with logfire.span("create_category.execute", name=request.name):
            category = await self.category_service.create_category(request)
            return CategoryResponse.from_category(category)
