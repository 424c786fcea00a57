"""PostgreSQL implementation of Category repository."""

from typing import Iterable, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pulse.domain.model import Category
from pulse.domain.repository import CategoryRepository
from pulse.domain.value import CategoryDomain, CategoryId, CategoryStatus
from pulse.persistence.mappers import category_to_dict, row_to_category
from pulse.persistence.tables import categories_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        stmt = select(categories_table).where(categories_table.c.id == category_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_category(dict(row)) if row else None

    async def find_children(
        self,
        parent_id: CategoryId,
        domain: CategoryDomain | None = None,
        statuses: Iterable[CategoryStatus] | None = None,
    ) -> list[Category]:
        """Find the direct children of a category."""
        stmt = select(categories_table).where(
            categories_table.c.parent_id == parent_id
        )
        if domain is not None:
            stmt = stmt.where(categories_table.c.domain == domain.value)
        if statuses is not None:
            stmt = stmt.where(
                categories_table.c.status.in_([status.value for status in statuses])
            )
        stmt = stmt.order_by(
            categories_table.c.display_order, categories_table.c.name
        )

        result = await self.session.execute(stmt)
        return [row_to_category(dict(row)) for row in result.mappings().all()]

    async def save(self, category: Category) -> Category:
        """Save a category (create or update)."""
        category_dict = category_to_dict(category)

        existing = await self.find_by_id(category.id)
        if existing:
            stmt = (
                update(categories_table)
                .where(categories_table.c.id == category.id)
                .values(**category_dict)
            )
        else:
            stmt = insert(categories_table).values(**category_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return category

    async def delete(self, category_id: CategoryId) -> None:
        """Delete a category."""
        stmt = delete(categories_table).where(categories_table.c.id == category_id)
        await self.session.execute(stmt)
        await self.session.flush()
