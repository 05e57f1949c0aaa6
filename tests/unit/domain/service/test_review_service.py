"""Unit tests for ReviewService."""

from uuid import uuid4

import pytest

from autohub.domain.error import NotFoundError, PermissionDeniedError, ValidationError
from autohub.domain.repository import (
    BusinessRepository,
    ReviewRepository,
    VehicleRepository,
)
from autohub.domain.service import ReviewService
from autohub.domain.value import ReviewItemType, UserRole
from tests.conftest import make_business, make_user, make_vehicle
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


async def _seed_vehicle(unit_env, **kwargs):
    vehicle = make_vehicle(**kwargs)
    await (await unit_env.get(VehicleRepository)).save(vehicle)
    return vehicle


class TestAddReview:
    @pytest.mark.asyncio
    async def test_business_review_copies_listing_title(self, unit_env):
        # Arrange
        service = await unit_env.get(ReviewService)
        repo = await unit_env.get(BusinessRepository)
        business = make_business(make_user(), title="Bob's Garage")
        await repo.save(business)

        # Act
        review = await service.add_review(
            make_user(name="Ann").as_caller(),
            ReviewItemType.BUSINESS,
            business.id,
            5,
            "Fixed it fast",
        )

        # Assert
        assert review.item_title == "Bob's Garage"
        assert review.author_name == "Ann"

    @pytest.mark.asyncio
    async def test_vehicle_review_copies_vehicle_name(self, unit_env):
        # Arrange
        service = await unit_env.get(ReviewService)
        vehicle = await _seed_vehicle(unit_env, name="Mazda MX-5 RF")

        # Act
        review = await service.add_review(
            make_user().as_caller(),
            ReviewItemType.VEHICLE,
            vehicle.id,
            3,
            "Thirsty but fun",
        )

        # Assert
        assert review.item_title == "Mazda MX-5 RF"
        assert review.item_id == vehicle.id

    @pytest.mark.asyncio
    async def test_review_of_missing_vehicle_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(ReviewService)
        reviews = await unit_env.get(ReviewRepository)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Vehicle"):
            await service.add_review(
                make_user().as_caller(), ReviewItemType.VEHICLE, uuid4(), 4, "Great"
            )
        assert await reviews.count() == 0

    @pytest.mark.asyncio
    async def test_review_of_missing_business_raises_not_found(self, unit_env):
        service = await unit_env.get(ReviewService)

        with pytest.raises(NotFoundError, match="Business"):
            await service.add_review(
                make_user().as_caller(), ReviewItemType.BUSINESS, uuid4(), 4, "Great"
            )

    @pytest.mark.asyncio
    async def test_blank_text_is_rejected(self, unit_env):
        service = await unit_env.get(ReviewService)
        vehicle = await _seed_vehicle(unit_env)

        with pytest.raises(ValidationError):
            await service.add_review(
                make_user().as_caller(), ReviewItemType.VEHICLE, vehicle.id, 4, "  "
            )


class TestDeleteReview:
    @pytest.mark.asyncio
    async def test_author_and_moderator_may_delete_others_may_not(self, unit_env):
        # Arrange
        service = await unit_env.get(ReviewService)
        repo = await unit_env.get(ReviewRepository)
        vehicle = await _seed_vehicle(unit_env)
        author = make_user().as_caller()
        first = await service.add_review(
            author, ReviewItemType.VEHICLE, vehicle.id, 2, "Meh"
        )
        second = await service.add_review(
            author, ReviewItemType.VEHICLE, vehicle.id, 1, "Bad"
        )

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.delete_review(make_user().as_caller(), first.id)

        await service.delete_review(author, first.id)
        await service.delete_review(
            make_user(role=UserRole.MODERATOR).as_caller(), second.id
        )
        assert await repo.count() == 0
