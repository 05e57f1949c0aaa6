"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from autohub.domain.model import Category
from autohub.domain.value import CategoryId


class CategoryRepository(ABC):
    """Repository for directory categories, listed by name."""

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find a category by name, ignoring case."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Category]:
        """All categories in name order."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save a category (create or update)."""
        pass

    @abstractmethod
    async def save_many(self, categories: Sequence[Category]) -> None:
        """Insert several categories at once."""
        pass

    @abstractmethod
    async def delete(self, category_id: CategoryId) -> bool:
        """Delete a category; False if none existed."""
        pass
