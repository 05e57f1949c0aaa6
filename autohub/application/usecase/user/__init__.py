"""User management use cases."""

from .manage_users import (
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

__all__ = [
    "CreateUserRequest",
    "CreateUserUseCase",
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
]
