"""Get vehicle use case.

The response models here are shared by every vehicle use case.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase
from autohub.domain.model import (
    RatingSummary,
    Vehicle,
    VehicleDimensions,
    VehicleFeatures,
    VehiclePerformance,
)
from autohub.domain.service import VehicleService
from autohub.domain.value import DriveType, FuelType, VehicleId


class VehicleResponse(BaseModel):
    """Catalogue vehicle with its rating summary."""

    vehicle_id: str
    name: str
    make: str
    model: str
    year: int
    price: float
    body_type: str
    drive_type: DriveType | None
    fuel_type: FuelType | None
    doors: int | None
    seats: int | None
    variants: list[str]
    description: str
    performance: VehiclePerformance
    features: VehicleFeatures
    dimensions: VehicleDimensions
    image_urls: list[str]
    created_at: datetime
    updated_at: datetime
    average_rating: float
    review_count: int

    @classmethod
    def from_vehicle(
        cls, vehicle: Vehicle, summary: Optional[RatingSummary] = None
    ) -> "VehicleResponse":
        summary = summary or RatingSummary()
        return cls(
            **vehicle.model_dump(exclude={"id"}),
            vehicle_id=str(vehicle.id),
            average_rating=summary.average_rating,
            review_count=summary.review_count,
        )


class VehicleListResponse(BaseModel):
    """A page of the catalogue."""

    vehicles: list[VehicleResponse]
    total: int
    limit: int
    offset: int


async def with_ratings(
    vehicle_service: VehicleService, vehicles: list[Vehicle]
) -> list[VehicleResponse]:
    """Attach rating summaries to vehicles using a single grouped query."""
    summaries = await vehicle_service.rating_summaries(vehicles)
    return [VehicleResponse.from_vehicle(v, summaries.get(v.id)) for v in vehicles]


class GetVehicleRequest(BaseModel):
    vehicle_id: str


class GetVehicleUseCase(BaseUseCase):
    """Use case for one vehicle page."""

    def __init__(self, vehicle_service: VehicleService) -> None:
        self.vehicle_service = vehicle_service

    async def execute(self, request: GetVehicleRequest) -> VehicleResponse:
        """Raises NotFoundError if the vehicle doesn't exist."""
        vehicle = await self.vehicle_service.get_vehicle_by_id(
            VehicleId(UUID(request.vehicle_id))
        )
        [response] = await with_ratings(self.vehicle_service, [vehicle])
        return response
