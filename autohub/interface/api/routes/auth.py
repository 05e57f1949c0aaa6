"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel

from autohub.application.usecase.auth import (
    GetCurrentUserUseCase,
    RegisterRequest,
    RegisterUseCase,
    UserResponse,
)
from autohub.config import Settings
from autohub.interface.api.session import (
    clear_session_cookie,
    optional_user,
    set_session_cookie,
)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Current session state.

    /auth/me reports an anonymous visitor instead of raising 401.
    """

    authenticated: bool
    user: UserResponse | None = None


@router.post(
    "/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> UserResponse:
    """Create an account and start a session.

    Sets cookie: auth_token
    """
    result = await register_use_case.execute(request)
    set_session_cookie(response, result.token, settings)
    logfire.info("User registered", user_id=result.user.user_id)
    return result.user


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Clear the session cookie."""
    clear_session_cookie(response)
    return LogoutResponse(success=True, message="Logged out successfully")


@router.get("/me", response_model=AuthStatusResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Return the signed-in user, if any."""
    user = await optional_user(auth_token, get_current_user_use_case)
    return AuthStatusResponse(authenticated=user is not None, user=user)
