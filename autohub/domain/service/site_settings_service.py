"""Site settings domain service."""

from typing import Any, cast

import logfire

from autohub.domain.model import SecuritySettings, SeoSettings, SettingsKind
from autohub.domain.model.common import DomainModel
from autohub.domain.model.site_settings import SETTINGS_MODELS
from autohub.domain.policy import can_administer, require
from autohub.domain.repository import SiteSettingsRepository
from autohub.domain.value import ActivityType, Caller

from .activity_service import ActivityService
from .base import Service


class SiteSettingsService(Service):
    """Reads and merges administrator-managed settings."""

    def __init__(
        self,
        site_settings_repository: SiteSettingsRepository,
        activity_service: ActivityService,
    ) -> None:
        self.site_settings_repository = site_settings_repository
        self.activity_service = activity_service

    async def get(self, kind: SettingsKind) -> DomainModel:
        """Stored values merged over the defaults."""
        stored = await self.site_settings_repository.get(kind) or {}
        model = SETTINGS_MODELS[kind]
        defaults = model().model_dump(mode="json")
        # Drop keys that are no longer part of the model
        known = {k: v for k, v in stored.items() if k in defaults}
        return model.model_validate({**defaults, **known})

    async def get_security(self) -> SecuritySettings:
        return cast(SecuritySettings, await self.get(SettingsKind.SECURITY))

    async def get_seo(self) -> SeoSettings:
        return cast(SeoSettings, await self.get(SettingsKind.SEO))

    async def update(
        self, caller: Caller, kind: SettingsKind, changes: dict[str, Any]
    ) -> DomainModel:
        """Merge changes into one settings document.

        Raises:
            PermissionDeniedError: If caller is not an administrator
            pydantic.ValidationError: If the merged settings are invalid
        """
        with logfire.span("update_site_settings", kind=kind.value):
            require(can_administer(caller), caller, "update", "settings", kind.value)
            current = await self.get(kind)
            merged = type(current).model_validate(
                {**current.model_dump(mode="json"), **changes}
            )
            await self.site_settings_repository.save(kind, merged.model_dump(mode="json"))

            await self.activity_service.log(
                f"{kind.value.capitalize()} settings updated by {caller.name}",
                ActivityType.DATA,
                user_id=caller.user_id,
            )
            logfire.info("Site settings updated", kind=kind.value, fields=sorted(changes))
            return merged
