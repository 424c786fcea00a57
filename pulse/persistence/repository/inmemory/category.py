"""In-memory category repository for testing."""

from typing import Iterable, Optional

from pulse.domain.model import Category
from pulse.domain.repository import CategoryRepository
from pulse.domain.value import CategoryDomain, CategoryId, CategoryStatus

from .base import InMemoryRepository


class InMemoryCategoryRepository(InMemoryRepository, CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self) -> None:
        self._categories: dict[CategoryId, Category] = {}

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        return self._categories.get(category_id)

    async def find_children(
        self,
        parent_id: CategoryId,
        domain: CategoryDomain | None = None,
        statuses: Iterable[CategoryStatus] | None = None,
    ) -> list[Category]:
        """Find the direct children of a category."""
        allowed = set(statuses) if statuses is not None else None
        children = [
            category
            for category in self._categories.values()
            if category.parent_id == parent_id
            and (domain is None or category.domain == domain)
            and (allowed is None or category.status in allowed)
        ]
        children.sort(key=lambda category: (category.display_order, category.name))
        return children

    async def save(self, category: Category) -> Category:
        """Save a category (create or update)."""
        self._categories[category.id] = category
        return category

    async def delete(self, category_id: CategoryId) -> None:
        """Delete a category."""
        self._categories.pop(category_id, None)
