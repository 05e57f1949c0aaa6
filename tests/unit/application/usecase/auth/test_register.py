"""Unit tests for RegisterUseCase and GetCurrentUserUseCase."""

import pytest

from autohub.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from autohub.domain.error import BusinessRuleViolationError
from autohub.domain.model import SettingsKind
from autohub.domain.repository import SiteSettingsRepository
from autohub.domain.value import UserRole
from autohub.util.jwt import JWTError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterUseCase:
    @pytest.mark.asyncio
    async def test_register_issues_token_for_new_user(self, unit_env):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        current_user = await unit_env.get(GetCurrentUserUseCase)

        # Act
        response = await register.execute(
            RegisterRequest(name="Ann", email="ann@example.com")
        )

        # Assert
        assert response.user.role == UserRole.USER
        me = await current_user.execute(GetCurrentUserRequest(token=response.token))
        assert me.user_id == response.user.user_id
        assert me.email == "ann@example.com"

    @pytest.mark.asyncio
    async def test_register_follows_stored_security_settings(self, unit_env):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        settings = await unit_env.get(SiteSettingsRepository)
        await settings.save(SettingsKind.SECURITY, {"allow_registration": False})

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await register.execute(RegisterRequest(name="Ann", email="ann@example.com"))

    @pytest.mark.asyncio
    async def test_garbage_token_is_rejected(self, unit_env):
        current_user = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await current_user.execute(GetCurrentUserRequest(token="not-a-jwt"))
