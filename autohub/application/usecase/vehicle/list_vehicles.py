"""List vehicles use cases."""

import logfire
from pydantic import BaseModel, Field

from autohub.application.usecase.base import BaseUseCase
from autohub.application.usecase.vehicle.get_vehicle import (
    VehicleListResponse,
    VehicleResponse,
    with_ratings,
)
from autohub.domain.repository import VehicleSortOrder
from autohub.domain.service import VehicleService


class ListVehiclesRequest(BaseModel):
    """Catalogue filters; any left as None are not applied."""

    make: str | None = None
    body_type: str | None = None
    year: int | None = None
    search: str | None = None
    sort: VehicleSortOrder = VehicleSortOrder.NEWEST
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListVehiclesUseCase(BaseUseCase):
    """Use case for browsing the catalogue."""

    def __init__(self, vehicle_service: VehicleService) -> None:
        self.vehicle_service = vehicle_service

    async def execute(self, request: ListVehiclesRequest) -> VehicleListResponse:
        with logfire.span(
            "list_vehicles.execute",
            make=request.make,
            body_type=request.body_type,
            limit=request.limit,
            offset=request.offset,
        ):
            vehicles, total = await self.vehicle_service.list_vehicles(
                make=request.make,
                body_type=request.body_type,
                year=request.year,
                search=request.search,
                sort=request.sort,
                limit=request.limit,
                offset=request.offset,
            )
            return VehicleListResponse(
                vehicles=await with_ratings(self.vehicle_service, vehicles),
                total=total,
                limit=request.limit,
                offset=request.offset,
            )


class ListRecentVehiclesRequest(BaseModel):
    count: int = Field(default=6, ge=1, le=50)


class ListRecentVehiclesUseCase(BaseUseCase):
    """Use case for the newest-arrivals strip on the home page."""

    def __init__(self, vehicle_service: VehicleService) -> None:
        self.vehicle_service = vehicle_service

    async def execute(self, request: ListRecentVehiclesRequest) -> list[VehicleResponse]:
        vehicles = await self.vehicle_service.list_recent(request.count)
        return await with_ratings(self.vehicle_service, vehicles)
