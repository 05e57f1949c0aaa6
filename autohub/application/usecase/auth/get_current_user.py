"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase
from autohub.domain.model import User
from autohub.domain.service import JWTService, UserService
from autohub.domain.value import UserId, UserRole, UserStatus


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class UserResponse(BaseModel):
    """Public view of a user profile."""

    user_id: str
    name: str
    email: str
    avatar_url: str | None
    role: UserRole
    status: UserStatus
    verified: bool
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            user_id=str(user.id),
            name=user.name,
            email=user.email,
            avatar_url=user.avatar_url,
            role=user.role,
            status=user.status,
            verified=user.verified,
            created_at=user.created_at,
        )


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Execute get current user flow.

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and user exists

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        # Verify token (raises JWTError if invalid)
        payload = self.jwt_service.verify_token(request.token)

        # Load user from database (raises NotFoundError if not found)
        user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))
        return UserResponse.from_user(user)
