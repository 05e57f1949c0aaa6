"""Unit tests for VehicleService."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from autohub.domain.error import NotFoundError, PermissionDeniedError, ValidationError
from autohub.domain.model import VehicleDetails
from autohub.domain.repository import (
    ActivityRepository,
    VehicleRepository,
    VehicleSortOrder,
)
from autohub.domain.service import ReviewService, VehicleService
from autohub.domain.value import ActivityType, ReviewItemType, UserRole
from tests.conftest import make_user, make_vehicle
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


def _at(day: int) -> datetime:
    return datetime(2026, 3, day, tzinfo=timezone.utc)


class TestAddVehicle:
    @pytest.mark.asyncio
    async def test_author_adds_vehicle_and_logs_data_activity(self, unit_env):
        # Arrange
        service = await unit_env.get(VehicleService)
        activity_repo = await unit_env.get(ActivityRepository)
        author = make_user(role=UserRole.AUTHOR)
        details = VehicleDetails(name="Toyota Hilux", make="Toyota", model="Hilux", year=2024)

        # Act
        vehicle = await service.add_vehicle(author.as_caller(), details)

        # Assert
        assert vehicle.name == "Toyota Hilux"
        assert (await service.get_vehicle_by_id(vehicle.id)).year == 2024
        entries = await activity_repo.find_page(type=ActivityType.DATA)
        assert [e.related_id for e in entries] == [str(vehicle.id)]

    @pytest.mark.asyncio
    async def test_plain_user_cannot_add_vehicle(self, unit_env):
        # Arrange
        service = await unit_env.get(VehicleService)
        details = VehicleDetails(name="Toyota Hilux", make="Toyota", model="Hilux", year=2024)

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.add_vehicle(make_user().as_caller(), details)


class TestListVehicles:
    @pytest.mark.asyncio
    async def test_filters_combine_and_total_ignores_paging(self, unit_env):
        # Arrange
        service = await unit_env.get(VehicleService)
        repo = await unit_env.get(VehicleRepository)
        await repo.save(make_vehicle(name="Mazda CX-5", model="CX-5", body_type="SUV"))
        await repo.save(make_vehicle(name="Mazda CX-30", model="CX-30", body_type="SUV"))
        await repo.save(make_vehicle(name="Mazda MX-5"))
        await repo.save(make_vehicle(name="Kia Sportage", make="Kia", body_type="SUV"))

        # Act
        vehicles, total = await service.list_vehicles(make="Mazda", body_type="SUV", limit=1)

        # Assert
        assert total == 2
        assert len(vehicles) == 1
        assert vehicles[0].make == "Mazda"

    @pytest.mark.asyncio
    async def test_search_matches_name_case_insensitively(self, unit_env):
        # Arrange
        service = await unit_env.get(VehicleService)
        repo = await unit_env.get(VehicleRepository)
        await repo.save(make_vehicle(name="Mazda MX-5"))
        await repo.save(make_vehicle(name="Kia Sportage", make="Kia"))

        # Act
        vehicles, total = await service.list_vehicles(search="  sport ")

        # Assert
        assert total == 1
        assert vehicles[0].name == "Kia Sportage"

    @pytest.mark.asyncio
    async def test_sort_orders_by_creation_time(self, unit_env):
        # Arrange
        service = await unit_env.get(VehicleService)
        repo = await unit_env.get(VehicleRepository)
        old = make_vehicle(name="Old", created_at=_at(1))
        new = make_vehicle(name="New", created_at=_at(9))
        await repo.save(old)
        await repo.save(new)

        # Act
        newest, _ = await service.list_vehicles()
        oldest, _ = await service.list_vehicles(sort=VehicleSortOrder.OLDEST)

        # Assert
        assert [v.name for v in newest] == ["New", "Old"]
        assert [v.name for v in oldest] == ["Old", "New"]

    @pytest.mark.asyncio
    async def test_rating_summaries_default_to_empty(self, unit_env):
        # Arrange
        service = await unit_env.get(VehicleService)
        reviews = await unit_env.get(ReviewService)
        repo = await unit_env.get(VehicleRepository)
        rated = make_vehicle(name="Rated")
        unrated = make_vehicle(name="Unrated")
        await repo.save(rated)
        await repo.save(unrated)
        await reviews.add_review(
            make_user().as_caller(), ReviewItemType.VEHICLE, rated.id, 4, "Solid"
        )

        # Act
        summaries = await service.rating_summaries([rated, unrated])

        # Assert
        assert summaries[rated.id].review_count == 1
        assert summaries[rated.id].average_rating == 4
        assert summaries[unrated.id].review_count == 0


class TestUpdateVehicle:
    @pytest.mark.asyncio
    async def test_moderator_edits_price(self, unit_env):
        # Arrange
        service = await unit_env.get(VehicleService)
        repo = await unit_env.get(VehicleRepository)
        vehicle = make_vehicle()
        await repo.save(vehicle)
        moderator = make_user(role=UserRole.MODERATOR)

        # Act
        updated = await service.update_vehicle(
            moderator.as_caller(), vehicle.id, {"price": 32000}
        )

        # Assert
        assert updated.price == 32000
        assert updated.name == vehicle.name
        assert updated.updated_at >= vehicle.updated_at

    @pytest.mark.asyncio
    async def test_author_cannot_edit(self, unit_env):
        # Arrange
        service = await unit_env.get(VehicleService)
        repo = await unit_env.get(VehicleRepository)
        vehicle = make_vehicle()
        await repo.save(vehicle)

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.update_vehicle(
                make_user(role=UserRole.AUTHOR).as_caller(), vehicle.id, {"price": 1}
            )

    @pytest.mark.asyncio
    async def test_unknown_field_is_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(VehicleService)
        repo = await unit_env.get(VehicleRepository)
        vehicle = make_vehicle()
        await repo.save(vehicle)

        # Act & Assert
        with pytest.raises(ValidationError, match="created_at"):
            await service.update_vehicle(
                make_user(role=UserRole.ADMINISTRATOR).as_caller(),
                vehicle.id,
                {"created_at": "2020-01-01T00:00:00Z"},
            )

    @pytest.mark.asyncio
    async def test_missing_vehicle_raises_not_found(self, unit_env):
        service = await unit_env.get(VehicleService)

        with pytest.raises(NotFoundError):
            await service.update_vehicle(
                make_user(role=UserRole.MODERATOR).as_caller(), uuid4(), {"price": 1}
            )


class TestDeleteVehicles:
    @pytest.mark.asyncio
    async def test_bulk_delete_skips_missing_ids(self, unit_env):
        # Arrange
        service = await unit_env.get(VehicleService)
        repo = await unit_env.get(VehicleRepository)
        first, second = make_vehicle(), make_vehicle()
        await repo.save(first)
        await repo.save(second)
        moderator = make_user(role=UserRole.MODERATOR)

        # Act
        deleted = await service.delete_vehicles(
            moderator.as_caller(), [first.id, second.id, uuid4()]
        )

        # Assert
        assert deleted == 2
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_single_delete_requires_moderator(self, unit_env):
        # Arrange
        service = await unit_env.get(VehicleService)
        repo = await unit_env.get(VehicleRepository)
        vehicle = make_vehicle()
        await repo.save(vehicle)

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.delete_vehicle(make_user().as_caller(), vehicle.id)
        assert await repo.find_by_id(vehicle.id) is not None
