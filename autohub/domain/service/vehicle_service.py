"""Vehicle catalogue domain service."""

from typing import Any, Dict, List, Optional, Sequence
from uuid import uuid4

import logfire

from autohub.domain.error import NotFoundError, ValidationError
from autohub.domain.model import RatingSummary, Vehicle, VehicleDetails
from autohub.domain.model.common import utcnow
from autohub.domain.model.vehicle import EDITABLE_VEHICLE_FIELDS
from autohub.domain.policy import can_moderate, is_staff, require
from autohub.domain.repository import (
    ReviewRepository,
    VehicleRepository,
    VehicleSortOrder,
)
from autohub.domain.value import ActivityType, Caller, ReviewItemType, VehicleId

from .activity_service import ActivityService
from .base import Service


class VehicleService(Service):
    """Domain service for the vehicle catalogue."""

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        review_repository: ReviewRepository,
        activity_service: ActivityService,
    ) -> None:
        """Initialize vehicle service.

        Args:
            vehicle_repository: Vehicle repository
            review_repository: Review repository, for rating summaries
            activity_service: Activity log service
        """
        self.vehicle_repository = vehicle_repository
        self.review_repository = review_repository
        self.activity_service = activity_service

    async def get_vehicle_by_id(self, vehicle_id: VehicleId) -> Vehicle:
        """Get vehicle by ID.

        Raises:
            NotFoundError: If vehicle doesn't exist
        """
        vehicle = await self.vehicle_repository.find_by_id(vehicle_id)
        if vehicle is None:
            raise NotFoundError("Vehicle", str(vehicle_id))
        return vehicle

    async def rating_summaries(
        self, vehicles: Sequence[Vehicle]
    ) -> Dict[VehicleId, RatingSummary]:
        """Average rating and review count for each vehicle (one query)."""
        if not vehicles:
            return {}
        summaries = await self.review_repository.summarize(
            ReviewItemType.VEHICLE, [v.id for v in vehicles]
        )
        return {v.id: summaries.get(v.id, RatingSummary()) for v in vehicles}

    async def list_vehicles(
        self,
        make: Optional[str] = None,
        body_type: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
        sort: VehicleSortOrder = VehicleSortOrder.NEWEST,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[List[Vehicle], int]:
        """Public catalogue with optional filters."""
        with logfire.span(
            "list_vehicles", make=make, body_type=body_type, year=year, search=search
        ):
            search = search.strip() if search else None
            total = await self.vehicle_repository.count(
                make=make, body_type=body_type, year=year, search=search
            )
            vehicles = await self.vehicle_repository.find_all(
                make=make,
                body_type=body_type,
                year=year,
                search=search,
                sort=sort,
                limit=limit,
                offset=offset,
            )
            return vehicles, total

    async def list_recent(self, count: int) -> List[Vehicle]:
        """Most recently added vehicles."""
        return await self.vehicle_repository.find_all(limit=count)

    async def add_vehicle(self, caller: Caller, details: VehicleDetails) -> Vehicle:
        """Add a vehicle to the catalogue.

        Raises:
            PermissionDeniedError: If caller is not staff
        """
        with logfire.span("add_vehicle", user_id=str(caller.user_id)):
            require(is_staff(caller), caller, "create", "vehicle", "new")

            vehicle = Vehicle(**details.model_dump(), id=VehicleId(uuid4()))
            saved = await self.vehicle_repository.save(vehicle)

            await self.activity_service.log(
                f"New vehicle added: {saved.name}",
                ActivityType.DATA,
                related_id=str(saved.id),
                user_id=caller.user_id,
            )
            logfire.info("Vehicle added", vehicle_id=str(saved.id))
            return saved

    async def update_vehicle(
        self, caller: Caller, vehicle_id: VehicleId, changes: Dict[str, Any]
    ) -> Vehicle:
        """Edit catalogue fields of a vehicle.

        Raises:
            NotFoundError: If vehicle doesn't exist
            PermissionDeniedError: If caller is not a moderator
            ValidationError: If changes include unknown fields
        """
        with logfire.span("update_vehicle", vehicle_id=str(vehicle_id)):
            require(can_moderate(caller), caller, "edit", "vehicle", str(vehicle_id))
            vehicle = await self.get_vehicle_by_id(vehicle_id)

            unknown = set(changes) - EDITABLE_VEHICLE_FIELDS
            if unknown:
                raise ValidationError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")

            updated = Vehicle.model_validate(
                {**vehicle.model_dump(), **changes, "updated_at": utcnow()}
            )
            saved = await self.vehicle_repository.save(updated)

            await self.activity_service.log(
                f"Vehicle updated: {saved.name}",
                ActivityType.DATA,
                related_id=str(vehicle_id),
                user_id=caller.user_id,
            )
            return saved

    async def delete_vehicle(self, caller: Caller, vehicle_id: VehicleId) -> None:
        """Remove a vehicle from the catalogue.

        Raises:
            NotFoundError: If vehicle doesn't exist
            PermissionDeniedError: If caller is not a moderator
        """
        with logfire.span("delete_vehicle", vehicle_id=str(vehicle_id)):
            require(can_moderate(caller), caller, "delete", "vehicle", str(vehicle_id))
            vehicle = await self.get_vehicle_by_id(vehicle_id)
            await self.vehicle_repository.delete(vehicle_id)

            await self.activity_service.log(
                f"Vehicle deleted: {vehicle.name}",
                ActivityType.DATA,
                related_id=str(vehicle_id),
                user_id=caller.user_id,
            )

    async def delete_vehicles(
        self, caller: Caller, vehicle_ids: Sequence[VehicleId]
    ) -> int:
        """Bulk removal; ids that no longer exist are skipped.

        Raises:
            PermissionDeniedError: If caller is not a moderator
        """
        with logfire.span("delete_vehicles", count=len(vehicle_ids)):
            require(can_moderate(caller), caller, "delete", "vehicles", "*")
            deleted = await self.vehicle_repository.delete_many(vehicle_ids)
            if deleted:
                await self.activity_service.log(
                    f"{deleted} vehicles deleted",
                    ActivityType.DATA,
                    user_id=caller.user_id,
                )
            return deleted
