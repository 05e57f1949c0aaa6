"""Administration use cases."""

from .dashboard import DashboardRequest, DashboardResponse, DashboardUseCase
from .site_settings import (
    GetSiteSettingsRequest,
    GetSiteSettingsUseCase,
    SiteSettingsResponse,
    UpdateSiteSettingsRequest,
    UpdateSiteSettingsUseCase,
)

__all__ = [
    "DashboardRequest",
    "DashboardResponse",
    "DashboardUseCase",
    "GetSiteSettingsRequest",
    "GetSiteSettingsUseCase",
    "SiteSettingsResponse",
    "UpdateSiteSettingsRequest",
    "UpdateSiteSettingsUseCase",
]
