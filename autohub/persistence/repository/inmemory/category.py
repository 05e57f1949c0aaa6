"""In-memory category repository for testing."""

from typing import List, Optional, Sequence

from autohub.domain.model import Category
from autohub.domain.repository import CategoryRepository
from autohub.domain.value import CategoryId


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self) -> None:
        self._categories: dict[CategoryId, Category] = {}

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        return self._categories.get(category_id)

    async def find_by_name(self, name: str) -> Optional[Category]:
        wanted = name.lower()
        return next(
            (c for c in self._categories.values() if c.name.lower() == wanted), None
        )

    async def find_all(self) -> List[Category]:
        return sorted(self._categories.values(), key=lambda c: c.name)

    async def count(self) -> int:
        return len(self._categories)

    async def save(self, category: Category) -> Category:
        self._categories[category.id] = category
        return category

    async def save_many(self, categories: Sequence[Category]) -> None:
        for category in categories:
            self._categories[category.id] = category

    async def delete(self, category_id: CategoryId) -> bool:
        return self._categories.pop(category_id, None) is not None
