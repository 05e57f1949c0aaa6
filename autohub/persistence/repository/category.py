"""PostgreSQL implementation of Category repository."""

from typing import List, Optional, Sequence

from sqlalchemy import asc, delete, func, insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from autohub.domain.model import Category
from autohub.domain.repository import CategoryRepository
from autohub.domain.value import CategoryId
from autohub.persistence.mappers import category_to_dict, row_to_category
from autohub.persistence.tables import categories_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        result = await self.session.execute(
            select(categories_table).where(categories_table.c.id == category_id)
        )
        row = result.mappings().first()
        return row_to_category(row) if row else None

    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find a category by name, ignoring case."""
        result = await self.session.execute(
            select(categories_table).where(
                func.lower(categories_table.c.name) == name.lower()
            )
        )
        row = result.mappings().first()
        return row_to_category(row) if row else None

    async def find_all(self) -> List[Category]:
        """All categories in name order."""
        result = await self.session.execute(
            select(categories_table).order_by(asc(categories_table.c.name))
        )
        return [row_to_category(row) for row in result.mappings().all()]

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(categories_table)
        )
        return result.scalar() or 0

    async def save(self, category: Category) -> Category:
        """Save a category (create or update)."""
        values = category_to_dict(category)
        stmt = pg_insert(categories_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[categories_table.c.id],
            set_={k: v for k, v in values.items() if k not in ("id", "created_at")},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return category

    async def save_many(self, categories: Sequence[Category]) -> None:
        """Insert several categories with one executemany."""
        if not categories:
            return
        await self.session.execute(
            insert(categories_table),
            [category_to_dict(category) for category in categories],
        )
        await self.session.flush()

    async def delete(self, category_id: CategoryId) -> bool:
        """Delete a category."""
        result = await self.session.execute(
            delete(categories_table)
            .where(categories_table.c.id == category_id)
            .returning(categories_table.c.id)
        )
        return result.first() is not None
