"""Authentication use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    UserResponse,
)
from .register import RegisterRequest, RegisterResponse, RegisterUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
    "UserResponse",
]
