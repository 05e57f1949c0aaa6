"""Register use case."""

import logfire
from pydantic import BaseModel, Field

from autohub.application.usecase.auth.get_current_user import UserResponse
from autohub.application.usecase.base import BaseUseCase
from autohub.domain.service import JWTService, SiteSettingsService, UserService


class RegisterRequest(BaseModel):
    """Register request."""

    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)


class RegisterResponse(BaseModel):
    """Register response."""

    user: UserResponse
    token: str  # Session token, set as an HTTP-only cookie by the API


class RegisterUseCase(BaseUseCase):
    """Use case for signing up a new user."""

    def __init__(
        self,
        user_service: UserService,
        site_settings_service: SiteSettingsService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            site_settings_service: Site settings service, for the registration policy
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.site_settings_service = site_settings_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute register flow.

        Steps:
        1. Read the security settings (registration switch, default role)
        2. Create the profile via UserService
        3. Issue a session token

        Raises:
            BusinessRuleViolationError: If registration is closed or the
                email is already registered
        """
        with logfire.span("register.execute", email=request.email):
            security = await self.site_settings_service.get_security()
            user = await self.user_service.register(request.name, request.email, security)
            token = self.jwt_service.create_token(str(user.id), user.name)
            return RegisterResponse(user=UserResponse.from_user(user), token=token)
