"""User management use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from autohub.application.usecase.auth import UserResponse
from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.domain.service import UserService
from autohub.domain.value import UserId, UserRole, UserStatus


class ListUsersRequest(BaseModel):
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    user_id: str


class ListUsersResponse(BaseModel):
    users: list[UserResponse]
    total: int
    limit: int
    offset: int


class ListUsersUseCase(BaseUseCase):
    """Use case for the administrators' user table."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow.

        Raises:
            PermissionDeniedError: If user is not an administrator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        users, total = await self.user_service.list_users(
            caller, limit=request.limit, offset=request.offset
        )
        return ListUsersResponse(
            users=[UserResponse.from_user(u) for u in users],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )


class CreateUserRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)
    role: UserRole = UserRole.USER
    user_id: str  # Acting administrator


class CreateUserUseCase(BaseUseCase):
    """Use case for an administrator adding a user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """Execute create user flow.

        Raises:
            PermissionDeniedError: If user is not an administrator
            BusinessRuleViolationError: If the email is already registered
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        user = await self.user_service.create_user(
            caller, request.name, request.email, request.role
        )
        return UserResponse.from_user(user)


class UpdateUserRequest(BaseModel):
    """Update user request. Omitted fields are left unchanged."""

    target_user_id: str
    name: str | None = Field(default=None, min_length=1, max_length=100)
    role: UserRole | None = None
    status: UserStatus | None = None
    user_id: str


class UpdateUserUseCase(BaseUseCase):
    """Use case for renaming yourself, or for administrators editing anyone."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UserResponse:
        """Execute update user flow.

        Raises:
            NotFoundError: If either user not found
            PermissionDeniedError: If the change needs an administrator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        with logfire.span("update_user.execute", target_user_id=request.target_user_id):
            user = await self.user_service.update_user(
                caller,
                UserId(UUID(request.target_user_id)),
                name=request.name,
                role=request.role,
                status=request.status,
            )
            return UserResponse.from_user(user)


class DeleteUserRequest(BaseModel):
    target_user_id: str
    user_id: str


class DeleteUserResponse(BaseModel):
    success: bool
    message: str


class DeleteUserUseCase(BaseUseCase):
    """Use case for removing a user and their activity entries."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow.

        Raises:
            NotFoundError: If either user not found
            PermissionDeniedError: If user is not an administrator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        await self.user_service.delete_user(caller, UserId(UUID(request.target_user_id)))
        return DeleteUserResponse(success=True, message="User deleted")
