"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable

from pulse.domain.model.category import Category
from pulse.domain.value import CategoryDomain, CategoryId, CategoryStatus


class CategoryRepository(ABC):
    """Repository for Category entity.

    Defines the contract for category persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Category | None:
        """Find a category by ID.

        Args:
            category_id: The category's unique identifier

        Returns:
            The category if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_children(
        self,
        parent_id: CategoryId,
        domain: CategoryDomain | None = None,
        statuses: Iterable[CategoryStatus] | None = None,
    ) -> list[Category]:
        """Find the direct children of a category.

        Args:
            parent_id: Parent category ID
            domain: Optional domain filter
            statuses: Optional status filter

        Returns:
            Children ordered by display order, then name
        """
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save a category (create or update)."""
        pass

    @abstractmethod
    async def delete(self, category_id: CategoryId) -> None:
        """Delete a category."""
        pass
