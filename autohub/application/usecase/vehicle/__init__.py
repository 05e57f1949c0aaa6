"""Vehicle catalogue use cases."""

from .get_vehicle import (
    GetVehicleRequest,
    GetVehicleUseCase,
    VehicleListResponse,
    VehicleResponse,
)
from .list_vehicles import (
    ListRecentVehiclesRequest,
    ListRecentVehiclesUseCase,
    ListVehiclesRequest,
    ListVehiclesUseCase,
)
from .manage_vehicles import (
    AddVehicleRequest,
    AddVehicleUseCase,
    DeleteVehiclesRequest,
    DeleteVehiclesResponse,
    DeleteVehiclesUseCase,
    UpdateVehicleRequest,
    UpdateVehicleUseCase,
)

__all__ = [
    "AddVehicleRequest",
    "AddVehicleUseCase",
    "DeleteVehiclesRequest",
    "DeleteVehiclesResponse",
    "DeleteVehiclesUseCase",
    "GetVehicleRequest",
    "GetVehicleUseCase",
    "ListRecentVehiclesRequest",
    "ListRecentVehiclesUseCase",
    "ListVehiclesRequest",
    "ListVehiclesUseCase",
    "UpdateVehicleRequest",
    "UpdateVehicleUseCase",
    "VehicleListResponse",
    "VehicleResponse",
]
