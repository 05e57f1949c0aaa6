"""Unit tests for CategoryService."""

from uuid import uuid4

import pytest

from autohub.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from autohub.domain.model.category import INITIAL_CATEGORY_NAMES
from autohub.domain.repository import ActivityRepository
from autohub.domain.service import CategoryService
from autohub.domain.value import ActivityType, UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


@pytest.fixture
def moderator():
    return make_user(role=UserRole.MODERATOR).as_caller()


class TestAddCategory:
    @pytest.mark.asyncio
    async def test_categories_list_in_name_order(self, unit_env, moderator):
        # Arrange
        service = await unit_env.get(CategoryService)

        # Act
        await service.add_category(moderator, "Showrooms")
        await service.add_category(moderator, " Car Rentals ", image_url="https://img/c.png")

        # Assert
        categories = await service.list_categories()
        assert [c.name for c in categories] == ["Car Rentals", "Showrooms"]
        assert categories[0].image_url == "https://img/c.png"

    @pytest.mark.asyncio
    async def test_duplicate_name_ignoring_case_is_rejected(self, unit_env, moderator):
        # Arrange
        service = await unit_env.get(CategoryService)
        await service.add_category(moderator, "Dealerships")

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await service.add_category(moderator, "DEALERSHIPS")

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, unit_env, moderator):
        service = await unit_env.get(CategoryService)

        with pytest.raises(ValidationError):
            await service.add_category(moderator, "   ")

    @pytest.mark.asyncio
    async def test_author_cannot_add_category(self, unit_env):
        service = await unit_env.get(CategoryService)

        with pytest.raises(PermissionDeniedError):
            await service.add_category(make_user(role=UserRole.AUTHOR).as_caller(), "Tuning")


class TestUpdateCategory:
    @pytest.mark.asyncio
    async def test_rename_to_own_name_in_other_case_is_allowed(self, unit_env, moderator):
        # Arrange
        service = await unit_env.get(CategoryService)
        category = await service.add_category(moderator, "car rentals")

        # Act
        updated = await service.update_category(moderator, category.id, name="Car Rentals")

        # Assert
        assert updated.name == "Car Rentals"
        assert updated.image_url is None

    @pytest.mark.asyncio
    async def test_rename_to_taken_name_is_rejected(self, unit_env, moderator):
        # Arrange
        service = await unit_env.get(CategoryService)
        await service.add_category(moderator, "Showrooms")
        category = await service.add_category(moderator, "Dealerships")

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await service.update_category(moderator, category.id, name="showrooms")

    @pytest.mark.asyncio
    async def test_image_only_change_keeps_name(self, unit_env, moderator):
        # Arrange
        service = await unit_env.get(CategoryService)
        category = await service.add_category(moderator, "Showrooms")

        # Act
        updated = await service.update_category(
            moderator, category.id, image_url="https://img/s.png"
        )

        # Assert
        assert updated.name == "Showrooms"
        assert updated.image_url == "https://img/s.png"

    @pytest.mark.asyncio
    async def test_missing_category_raises_not_found(self, unit_env, moderator):
        service = await unit_env.get(CategoryService)

        with pytest.raises(NotFoundError):
            await service.update_category(moderator, uuid4(), name="Anything")


class TestDeleteCategory:
    @pytest.mark.asyncio
    async def test_delete_logs_category_activity(self, unit_env, moderator):
        # Arrange
        service = await unit_env.get(CategoryService)
        activity_repo = await unit_env.get(ActivityRepository)
        category = await service.add_category(moderator, "Showrooms")

        # Act
        await service.delete_category(moderator, category.id)

        # Assert
        assert await service.list_categories() == []
        assert await activity_repo.count(type=ActivityType.CATEGORY) == 2


class TestSeedCategories:
    @pytest.mark.asyncio
    async def test_seed_fills_empty_list(self, unit_env, moderator):
        # Arrange
        service = await unit_env.get(CategoryService)

        # Act
        created = await service.seed_initial_categories(moderator)

        # Assert
        assert created == len(INITIAL_CATEGORY_NAMES)
        names = {c.name for c in await service.list_categories()}
        assert names == set(INITIAL_CATEGORY_NAMES)

    @pytest.mark.asyncio
    async def test_seed_does_nothing_when_categories_exist(self, unit_env, moderator):
        # Arrange
        service = await unit_env.get(CategoryService)
        await service.add_category(moderator, "Tuning")

        # Act
        created = await service.seed_initial_categories(moderator)

        # Assert
        assert created == 0
        assert len(await service.list_categories()) == 1
