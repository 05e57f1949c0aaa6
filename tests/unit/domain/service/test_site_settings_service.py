"""Unit tests for SiteSettingsService."""

import pydantic
import pytest

from autohub.domain.error import PermissionDeniedError
from autohub.domain.model import SettingsKind
from autohub.domain.repository import SiteSettingsRepository
from autohub.domain.service import SiteSettingsService
from autohub.domain.value import UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


class TestSiteSettings:
    @pytest.mark.asyncio
    async def test_defaults_when_nothing_stored(self, unit_env):
        service = await unit_env.get(SiteSettingsService)

        security = await service.get_security()

        assert security.allow_registration is True
        assert security.default_user_role == UserRole.USER

    @pytest.mark.asyncio
    async def test_stored_values_merge_over_defaults(self, unit_env):
        # Arrange
        service = await unit_env.get(SiteSettingsService)
        repo = await unit_env.get(SiteSettingsRepository)
        await repo.save(SettingsKind.SEO, {"site_title": "Car Talk", "retired_key": 1})

        # Act
        seo = await service.get_seo()

        # Assert
        assert seo.site_title == "Car Talk"
        assert seo.robots_txt.startswith("User-agent")

    @pytest.mark.asyncio
    async def test_update_merges_partial_changes(self, unit_env):
        # Arrange
        service = await unit_env.get(SiteSettingsService)
        admin = make_user(role=UserRole.ADMINISTRATOR).as_caller()
        await service.update(admin, SettingsKind.SECURITY, {"allow_registration": False})

        # Act
        await service.update(
            admin, SettingsKind.SECURITY, {"default_user_role": "Business Owner"}
        )

        # Assert
        security = await service.get_security()
        assert security.allow_registration is False
        assert security.default_user_role == UserRole.BUSINESS_OWNER

    @pytest.mark.asyncio
    async def test_staff_default_role_is_rejected(self, unit_env):
        service = await unit_env.get(SiteSettingsService)
        admin = make_user(role=UserRole.ADMINISTRATOR).as_caller()

        with pytest.raises(pydantic.ValidationError):
            await service.update(
                admin, SettingsKind.SECURITY, {"default_user_role": "Administrator"}
            )

    @pytest.mark.asyncio
    async def test_only_administrators_update(self, unit_env):
        service = await unit_env.get(SiteSettingsService)
        moderator = make_user(role=UserRole.MODERATOR).as_caller()

        with pytest.raises(PermissionDeniedError):
            await service.update(moderator, SettingsKind.SEO, {"site_title": "Nope"})
