"""Directory category domain service."""

from typing import List, Optional
from uuid import uuid4

import logfire

from autohub.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from autohub.domain.model import Category
from autohub.domain.model.category import INITIAL_CATEGORY_NAMES
from autohub.domain.policy import can_moderate, require
from autohub.domain.repository import CategoryRepository
from autohub.domain.value import ActivityType, Caller, CategoryId

from .activity_service import ActivityService
from .base import Service


class CategoryService(Service):
    """Domain service for directory categories.

    Names are unique ignoring case; renaming to a name another category
    holds is rejected.
    """

    def __init__(
        self,
        category_repository: CategoryRepository,
        activity_service: ActivityService,
    ) -> None:
        self.category_repository = category_repository
        self.activity_service = activity_service

    async def list_categories(self) -> List[Category]:
        return await self.category_repository.find_all()

    async def get_category_by_id(self, category_id: CategoryId) -> Category:
        """Raises NotFoundError if the category doesn't exist."""
        category = await self.category_repository.find_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", str(category_id))
        return category

    async def add_category(
        self, caller: Caller, name: str, image_url: Optional[str] = None
    ) -> Category:
        """Create a category.

        Raises:
            PermissionDeniedError: If caller is not a moderator
            ValidationError: If name is blank
            BusinessRuleViolationError: If the name is taken
        """
        with logfire.span("add_category", name=name):
            require(can_moderate(caller), caller, "create", "category", "new")
            name = await self._free_name(name)

            category = await self.category_repository.save(
                Category(id=CategoryId(uuid4()), name=name, image_url=image_url)
            )
            await self.activity_service.log(
                f"Category added: {category.name}",
                ActivityType.CATEGORY,
                related_id=str(category.id),
                user_id=caller.user_id,
            )
            return category

    async def update_category(
        self,
        caller: Caller,
        category_id: CategoryId,
        name: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> Category:
        """Rename a category or change its image.

        Raises:
            NotFoundError: If category doesn't exist
            PermissionDeniedError: If caller is not a moderator
            ValidationError: If name is blank
            BusinessRuleViolationError: If the new name is taken
        """
        with logfire.span("update_category", category_id=str(category_id)):
            require(can_moderate(caller), caller, "edit", "category", str(category_id))
            category = await self.get_category_by_id(category_id)

            update = {}
            if name is not None:
                update["name"] = await self._free_name(name, keep=category_id)
            if image_url is not None:
                update["image_url"] = image_url

            saved = await self.category_repository.save(category.model_copy(update=update))
            await self.activity_service.log(
                f"Category updated: {saved.name}",
                ActivityType.CATEGORY,
                related_id=str(category_id),
                user_id=caller.user_id,
            )
            return saved

    async def delete_category(self, caller: Caller, category_id: CategoryId) -> None:
        """Delete a category; listings keep their category text.

        Raises:
            NotFoundError: If category doesn't exist
            PermissionDeniedError: If caller is not a moderator
        """
        with logfire.span("delete_category", category_id=str(category_id)):
            require(can_moderate(caller), caller, "delete", "category", str(category_id))
            category = await self.get_category_by_id(category_id)
            await self.category_repository.delete(category_id)

            await self.activity_service.log(
                f"Category deleted: {category.name}",
                ActivityType.CATEGORY,
                related_id=str(category_id),
                user_id=caller.user_id,
            )

    async def seed_initial_categories(self, caller: Caller) -> int:
        """Fill an empty category list with the default set.

        Returns:
            Number of categories created; 0 if any category already exists

        Raises:
            PermissionDeniedError: If caller is not a moderator
        """
        with logfire.span("seed_initial_categories"):
            require(can_moderate(caller), caller, "seed", "categories", "*")
            if await self.category_repository.count() > 0:
                logfire.info("Categories already present, skipping seed")
                return 0

            categories = [
                Category(id=CategoryId(uuid4()), name=name)
                for name in INITIAL_CATEGORY_NAMES
            ]
            await self.category_repository.save_many(categories)

            await self.activity_service.log(
                f"Seeded {len(categories)} initial categories",
                ActivityType.DATA,
                user_id=caller.user_id,
            )
            return len(categories)

    async def _free_name(self, name: str, keep: Optional[CategoryId] = None) -> str:
        name = name.strip()
        if not name:
            raise ValidationError("Category name cannot be empty")
        existing = await self.category_repository.find_by_name(name)
        if existing is not None and existing.id != keep:
            raise BusinessRuleViolationError(f"Category already exists: {name}")
        return name
