"""In-memory vehicle repository for testing."""

from typing import List, Optional, Sequence

from autohub.domain.model import Vehicle
from autohub.domain.repository import VehicleRepository, VehicleSortOrder
from autohub.domain.value import VehicleId


class InMemoryVehicleRepository(VehicleRepository):
    """In-memory implementation of VehicleRepository for testing."""

    def __init__(self) -> None:
        self._vehicles: dict[VehicleId, Vehicle] = {}

    def _matching(
        self,
        make: Optional[str] = None,
        body_type: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[Vehicle]:
        vehicles = list(self._vehicles.values())
        if make:
            vehicles = [v for v in vehicles if v.make == make]
        if body_type:
            vehicles = [v for v in vehicles if v.body_type == body_type]
        if year is not None:
            vehicles = [v for v in vehicles if v.year == year]
        if search:
            needle = search.lower()
            vehicles = [v for v in vehicles if needle in v.name.lower()]
        return vehicles

    async def find_by_id(self, vehicle_id: VehicleId) -> Optional[Vehicle]:
        return self._vehicles.get(vehicle_id)

    async def find_all(
        self,
        make: Optional[str] = None,
        body_type: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
        sort: VehicleSortOrder = VehicleSortOrder.NEWEST,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Vehicle]:
        vehicles = self._matching(make=make, body_type=body_type, year=year, search=search)
        vehicles.sort(
            key=lambda v: v.created_at, reverse=sort == VehicleSortOrder.NEWEST
        )
        return vehicles[offset : offset + limit]

    async def count(
        self,
        make: Optional[str] = None,
        body_type: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
    ) -> int:
        return len(
            self._matching(make=make, body_type=body_type, year=year, search=search)
        )

    async def save(self, vehicle: Vehicle) -> Vehicle:
        self._vehicles[vehicle.id] = vehicle
        return vehicle

    async def delete(self, vehicle_id: VehicleId) -> bool:
        return self._vehicles.pop(vehicle_id, None) is not None

    async def delete_many(self, vehicle_ids: Sequence[VehicleId]) -> int:
        return sum(
            1 for vehicle_id in set(vehicle_ids) if self._vehicles.pop(vehicle_id, None)
        )
