"""Catalogue management use cases: add, edit and remove vehicles."""

from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.vehicle.get_vehicle import (
    VehicleResponse,
    with_ratings,
)
from autohub.domain.model import VehicleDetails
from autohub.domain.service import UserService, VehicleService
from autohub.domain.value import VehicleId


class AddVehicleRequest(BaseModel):
    details: VehicleDetails
    user_id: str


class AddVehicleUseCase(BaseUseCase):
    """Use case for adding a vehicle to the catalogue."""

    def __init__(
        self, vehicle_service: VehicleService, user_service: UserService
    ) -> None:
        self.vehicle_service = vehicle_service
        self.user_service = user_service

    async def execute(self, request: AddVehicleRequest) -> VehicleResponse:
        """Execute add vehicle flow.

        Raises:
            NotFoundError: If user not found
            PermissionDeniedError: If user is not staff
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        with logfire.span("add_vehicle.execute", make=request.details.make):
            vehicle = await self.vehicle_service.add_vehicle(caller, request.details)
            return VehicleResponse.from_vehicle(vehicle)


class UpdateVehicleRequest(BaseModel):
    """Only the fields present in changes are updated."""

    vehicle_id: str
    changes: dict[str, Any]
    user_id: str


class UpdateVehicleUseCase(BaseUseCase):
    def __init__(
        self, vehicle_service: VehicleService, user_service: UserService
    ) -> None:
        self.vehicle_service = vehicle_service
        self.user_service = user_service

    async def execute(self, request: UpdateVehicleRequest) -> VehicleResponse:
        """Execute update vehicle flow.

        Raises:
            NotFoundError: If vehicle or user not found
            PermissionDeniedError: If user is not a moderator
            ValidationError: If changes name unknown fields
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        vehicle = await self.vehicle_service.update_vehicle(
            caller, VehicleId(UUID(request.vehicle_id)), request.changes
        )
        [response] = await with_ratings(self.vehicle_service, [vehicle])
        return response


class DeleteVehiclesRequest(BaseModel):
    """Delete one or more vehicles."""

    vehicle_ids: list[str]
    user_id: str


class DeleteVehiclesResponse(BaseModel):
    deleted: int


class DeleteVehiclesUseCase(BaseUseCase):
    """Use case for removing vehicles, singly or in bulk."""

    def __init__(
        self, vehicle_service: VehicleService, user_service: UserService
    ) -> None:
        self.vehicle_service = vehicle_service
        self.user_service = user_service

    async def execute(self, request: DeleteVehiclesRequest) -> DeleteVehiclesResponse:
        """Execute delete flow.

        A single id must exist; in bulk, missing ids are skipped.

        Raises:
            NotFoundError: If a single requested vehicle doesn't exist
            PermissionDeniedError: If user is not a moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        vehicle_ids = [VehicleId(UUID(vid)) for vid in request.vehicle_ids]
        if len(vehicle_ids) == 1:
            await self.vehicle_service.delete_vehicle(caller, vehicle_ids[0])
            return DeleteVehiclesResponse(deleted=1)
        deleted = await self.vehicle_service.delete_vehicles(caller, vehicle_ids)
        return DeleteVehiclesResponse(deleted=deleted)
