"""Site settings use cases."""

from typing import Any

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.domain.model import SettingsKind
from autohub.domain.service import SiteSettingsService, UserService


class SiteSettingsResponse(BaseModel):
    kind: SettingsKind
    settings: dict[str, Any]


class GetSiteSettingsRequest(BaseModel):
    kind: SettingsKind


class GetSiteSettingsUseCase(BaseUseCase):
    """Use case for reading one settings document merged over defaults."""

    def __init__(self, site_settings_service: SiteSettingsService) -> None:
        self.site_settings_service = site_settings_service

    async def execute(self, request: GetSiteSettingsRequest) -> SiteSettingsResponse:
        settings = await self.site_settings_service.get(request.kind)
        return SiteSettingsResponse(
            kind=request.kind, settings=settings.model_dump(mode="json")
        )


class UpdateSiteSettingsRequest(BaseModel):
    """Fields to merge into the stored document."""

    kind: SettingsKind
    changes: dict[str, Any]
    user_id: str


class UpdateSiteSettingsUseCase(BaseUseCase):
    """Use case for administrators editing site settings."""

    def __init__(
        self, site_settings_service: SiteSettingsService, user_service: UserService
    ) -> None:
        self.site_settings_service = site_settings_service
        self.user_service = user_service

    async def execute(self, request: UpdateSiteSettingsRequest) -> SiteSettingsResponse:
        """Execute update settings flow.

        Raises:
            PermissionDeniedError: If user is not an administrator
            pydantic.ValidationError: If the merged settings are invalid
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        settings = await self.site_settings_service.update(
            caller, request.kind, request.changes
        )
        return SiteSettingsResponse(
            kind=request.kind, settings=settings.model_dump(mode="json")
        )
