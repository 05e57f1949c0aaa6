"""Vehicle catalogue routes."""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from autohub.application.usecase.auth import GetCurrentUserUseCase
from autohub.application.usecase.vehicle import (
    AddVehicleRequest,
    AddVehicleUseCase,
    DeleteVehiclesRequest,
    DeleteVehiclesResponse,
    DeleteVehiclesUseCase,
    GetVehicleRequest,
    GetVehicleUseCase,
    ListRecentVehiclesRequest,
    ListRecentVehiclesUseCase,
    ListVehiclesRequest,
    ListVehiclesUseCase,
    UpdateVehicleRequest,
    UpdateVehicleUseCase,
    VehicleListResponse,
    VehicleResponse,
)
from autohub.config import PaginationSettings
from autohub.domain.model import VehicleDetails
from autohub.domain.repository import VehicleSortOrder
from autohub.interface.api.session import authenticate, page_limit

router = APIRouter(prefix="/vehicles", tags=["vehicles"], route_class=DishkaRoute)


class BulkDeleteAPIRequest(BaseModel):
    vehicle_ids: list[UUID] = Field(min_length=1, max_length=500)


@router.get("", response_model=VehicleListResponse)
async def list_vehicles(
    list_vehicles_use_case: FromDishka[ListVehiclesUseCase],
    pagination: FromDishka[PaginationSettings],
    make: str | None = Query(default=None),
    body_type: str | None = Query(default=None),
    year: int | None = Query(default=None),
    search: str | None = Query(default=None),
    sort: VehicleSortOrder = Query(default=VehicleSortOrder.NEWEST),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> VehicleListResponse:
    """Browse the catalogue by make, body type, year or name."""
    return await list_vehicles_use_case.execute(
        ListVehiclesRequest(
            make=make,
            body_type=body_type,
            year=year,
            search=search,
            sort=sort,
            limit=page_limit(limit, pagination),
            offset=offset,
        )
    )


@router.get("/recent", response_model=list[VehicleResponse])
async def list_recent_vehicles(
    list_recent_use_case: FromDishka[ListRecentVehiclesUseCase],
    count: int = Query(default=6, ge=1, le=50),
) -> list[VehicleResponse]:
    return await list_recent_use_case.execute(ListRecentVehiclesRequest(count=count))


@router.post("", response_model=VehicleResponse, status_code=status.HTTP_201_CREATED)
async def add_vehicle(
    request: VehicleDetails,
    add_vehicle_use_case: FromDishka[AddVehicleUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> VehicleResponse:
    """Add a vehicle. Staff only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await add_vehicle_use_case.execute(
        AddVehicleRequest(details=request, user_id=user.user_id)
    )


@router.post("/bulk-delete", response_model=DeleteVehiclesResponse)
async def delete_vehicles(
    request: BulkDeleteAPIRequest,
    delete_vehicles_use_case: FromDishka[DeleteVehiclesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteVehiclesResponse:
    """Remove several vehicles at once. Moderators only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await delete_vehicles_use_case.execute(
        DeleteVehiclesRequest(
            vehicle_ids=[str(vid) for vid in request.vehicle_ids], user_id=user.user_id
        )
    )


@router.get("/{vehicle_id}", response_model=VehicleResponse)
async def get_vehicle(
    vehicle_id: UUID,
    get_vehicle_use_case: FromDishka[GetVehicleUseCase],
) -> VehicleResponse:
    return await get_vehicle_use_case.execute(
        GetVehicleRequest(vehicle_id=str(vehicle_id))
    )


@router.patch("/{vehicle_id}", response_model=VehicleResponse)
async def update_vehicle(
    vehicle_id: UUID,
    request: dict[str, Any],
    update_vehicle_use_case: FromDishka[UpdateVehicleUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> VehicleResponse:
    """Edit catalogue fields. Moderators only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await update_vehicle_use_case.execute(
        UpdateVehicleRequest(
            vehicle_id=str(vehicle_id), changes=request, user_id=user.user_id
        )
    )


@router.delete("/{vehicle_id}", response_model=DeleteVehiclesResponse)
async def delete_vehicle(
    vehicle_id: UUID,
    delete_vehicles_use_case: FromDishka[DeleteVehiclesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteVehiclesResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await delete_vehicles_use_case.execute(
        DeleteVehiclesRequest(vehicle_ids=[str(vehicle_id)], user_id=user.user_id)
    )
