"""Vehicle repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence

from autohub.domain.model import Vehicle
from autohub.domain.value import VehicleId


class VehicleSortOrder(str, Enum):
    """Sort order for vehicle lists."""

    NEWEST = "newest"
    OLDEST = "oldest"


class VehicleRepository(ABC):
    """Repository for the Vehicle catalogue.

    Filters left as None are not applied.
    """

    @abstractmethod
    async def find_by_id(self, vehicle_id: VehicleId) -> Optional[Vehicle]:
        """Find a vehicle by ID."""
        pass

    @abstractmethod
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
        """Find vehicles matching the filters.

        Args:
            make: Exact make (brand)
            body_type: Exact body type
            year: Model year
            search: Case-insensitive substring of the name
            sort: Sort order by creation time
            limit: Maximum number of vehicles to return
            offset: Number of vehicles to skip

        Returns:
            One page of vehicles
        """
        pass

    @abstractmethod
    async def count(
        self,
        make: Optional[str] = None,
        body_type: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count vehicles matching the filters."""
        pass

    @abstractmethod
    async def save(self, vehicle: Vehicle) -> Vehicle:
        """Save a vehicle (create or update)."""
        pass

    @abstractmethod
    async def delete(self, vehicle_id: VehicleId) -> bool:
        """Delete a vehicle.

        Returns:
            True if a vehicle was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_many(self, vehicle_ids: Sequence[VehicleId]) -> int:
        """Delete several vehicles in one statement.

        Returns:
            Number of vehicles deleted
        """
        pass
