"""Unit tests for DashboardService."""

import pytest

from autohub.domain.error import PermissionDeniedError
from autohub.domain.repository import (
    BlogPostRepository,
    BusinessRepository,
    QuestionRepository,
    UserRepository,
    VehicleRepository,
)
from autohub.domain.service import DashboardService
from autohub.domain.value import BusinessStatus, UserRole
from tests.conftest import (
    make_blog_post,
    make_business,
    make_question,
    make_user,
    make_vehicle,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


class TestDashboard:
    @pytest.mark.asyncio
    async def test_counts(self, unit_env):
        # Arrange
        service = await unit_env.get(DashboardService)
        users = await unit_env.get(UserRepository)
        businesses = await unit_env.get(BusinessRepository)
        questions = await unit_env.get(QuestionRepository)
        owner = await users.save(make_user())
        await users.save(make_user())
        await businesses.save(make_business(owner, verified=True))
        await businesses.save(make_business(owner, status=BusinessStatus.PENDING))
        await businesses.save(make_business(owner, status=BusinessStatus.EDIT_PENDING))
        await businesses.save(make_business(owner, status=BusinessStatus.REJECTED))
        await questions.save(make_question(owner))
        await (await unit_env.get(VehicleRepository)).save(make_vehicle())
        await (await unit_env.get(BlogPostRepository)).save(make_blog_post(owner))

        # Act
        counts = await service.dashboard_counts(
            make_user(role=UserRole.MODERATOR).as_caller()
        )

        # Assert
        assert counts.users == 2
        assert counts.verified_businesses == 1
        assert counts.pending_listings == 2
        assert counts.reviews == 0
        assert counts.questions == 1
        assert counts.vehicles == 1
        assert counts.blog_posts == 1

    @pytest.mark.asyncio
    async def test_requires_moderator(self, unit_env):
        service = await unit_env.get(DashboardService)

        with pytest.raises(PermissionDeniedError):
            await service.dashboard_counts(make_user(role=UserRole.AUTHOR).as_caller())
