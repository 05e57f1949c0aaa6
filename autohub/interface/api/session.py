"""Session cookie helpers shared by the routers."""

from fastapi import HTTPException, Response, status

from autohub.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    UserResponse,
)
from autohub.config import PaginationSettings, Settings
from autohub.domain.error import NotFoundError
from autohub.util.jwt import JWTError

AUTH_COOKIE = "auth_token"


async def authenticate(
    auth_token: str | None, get_current_user_use_case: GetCurrentUserUseCase
) -> UserResponse:
    """Resolve the session cookie to a user.

    Raises:
        HTTPException: 401 if the cookie is missing, invalid, expired, or
            names a user that no longer exists
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except (JWTError, NotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


async def optional_user(
    auth_token: str | None, get_current_user_use_case: GetCurrentUserUseCase
) -> UserResponse | None:
    """Like authenticate, but anonymous visitors get None."""
    if not auth_token:
        return None
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except (JWTError, NotFoundError):
        return None


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=settings.environment == "production",
        samesite="lax",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(key=AUTH_COOKIE)


def page_limit(limit: int | None, pagination: PaginationSettings) -> int:
    """Apply the configured default and ceiling to a requested page size."""
    if limit is None:
        return pagination.default_limit
    return max(1, min(limit, pagination.max_limit))
