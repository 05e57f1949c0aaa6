"""User administration routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from autohub.application.usecase.auth import GetCurrentUserUseCase, UserResponse
from autohub.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
)
from autohub.config import PaginationSettings
from autohub.domain.value import UserRole, UserStatus
from autohub.interface.api.session import authenticate, page_limit

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class CreateUserAPIRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)
    role: UserRole = UserRole.USER


class UpdateUserAPIRequest(BaseModel):
    """Fields left out are not changed."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    role: UserRole | None = None
    status: UserStatus | None = None


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    pagination: FromDishka[PaginationSettings],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListUsersResponse:
    """List all users. Administrators only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await list_users_use_case.execute(
        ListUsersRequest(
            limit=page_limit(limit, pagination), offset=offset, user_id=user.user_id
        )
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserAPIRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await create_user_use_case.execute(
        CreateUserRequest(
            name=request.name,
            email=request.email,
            role=request.role,
            user_id=user.user_id,
        )
    )


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UpdateUserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UserResponse:
    """Rename, change role, or suspend a user. Administrators only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await update_user_use_case.execute(
        UpdateUserRequest(
            target_user_id=str(user_id),
            name=request.name,
            role=request.role,
            status=request.status,
            user_id=user.user_id,
        )
    )


@router.delete("/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: UUID,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteUserResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await delete_user_use_case.execute(
        DeleteUserRequest(target_user_id=str(user_id), user_id=user.user_id)
    )
