"""Site administration routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from autohub.application.usecase.admin import (
    DashboardRequest,
    DashboardResponse,
    DashboardUseCase,
    GetSiteSettingsRequest,
    GetSiteSettingsUseCase,
    SiteSettingsResponse,
    UpdateSiteSettingsRequest,
    UpdateSiteSettingsUseCase,
)
from autohub.application.usecase.auth import GetCurrentUserUseCase
from autohub.domain.model import SettingsKind
from autohub.interface.api.session import authenticate

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    dashboard_use_case: FromDishka[DashboardUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DashboardResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await dashboard_use_case.execute(DashboardRequest(user_id=user.user_id))


@router.get("/settings/{kind}", response_model=SiteSettingsResponse)
async def get_site_settings(
    kind: SettingsKind,
    get_site_settings_use_case: FromDishka[GetSiteSettingsUseCase],
) -> SiteSettingsResponse:
    """Public read, so the frontend can render SEO tags and the signup form."""
    return await get_site_settings_use_case.execute(GetSiteSettingsRequest(kind=kind))


@router.patch("/settings/{kind}", response_model=SiteSettingsResponse)
async def update_site_settings(
    kind: SettingsKind,
    request: dict[str, Any],
    update_site_settings_use_case: FromDishka[UpdateSiteSettingsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SiteSettingsResponse:
    """Merge changes into a settings document. Administrators only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await update_site_settings_use_case.execute(
        UpdateSiteSettingsRequest(kind=kind, changes=request, user_id=user.user_id)
    )
