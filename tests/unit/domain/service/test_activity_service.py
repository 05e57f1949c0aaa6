"""Unit tests for ActivityService."""

from uuid import uuid4

import pytest

from autohub.domain.error import PermissionDeniedError
from autohub.domain.service import ActivityService
from autohub.domain.value import ActivityId, ActivityType, UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


class TestActivityLog:
    @pytest.mark.asyncio
    async def test_filter_by_type_and_search(self, unit_env):
        # Arrange
        service = await unit_env.get(ActivityService)
        moderator = make_user(role=UserRole.MODERATOR).as_caller()
        await service.log("New user registered: Ann", ActivityType.USER)
        await service.log("New business listing submitted: Tyre Hut", ActivityType.LISTING)
        await service.log("Business listing updated: Tyre Hut", ActivityType.LISTING)

        # Act
        listings, listing_total = await service.list_activities(
            moderator, type=ActivityType.LISTING
        )
        matches, match_total = await service.list_activities(moderator, search="tyre HUT")
        page, _ = await service.list_activities(moderator, limit=1, offset=1)

        # Assert
        assert listing_total == 2
        assert {a.type for a in listings} == {ActivityType.LISTING}
        assert match_total == 2
        assert len(matches) == 2
        assert len(page) == 1

    @pytest.mark.asyncio
    async def test_mark_read_ignores_unknown_ids(self, unit_env):
        # Arrange
        service = await unit_env.get(ActivityService)
        moderator = make_user(role=UserRole.MODERATOR).as_caller()
        entry = await service.log("Review deleted", ActivityType.REVIEW)

        # Act
        updated = await service.mark_read(moderator, [entry.id, ActivityId(uuid4())])

        # Assert
        assert updated == 1
        activities, _ = await service.list_activities(moderator)
        assert activities[0].read is True

    @pytest.mark.asyncio
    async def test_clear_all_leaves_a_record_of_itself(self, unit_env):
        # Arrange
        service = await unit_env.get(ActivityService)
        moderator = make_user(role=UserRole.MODERATOR, name="Mo").as_caller()
        await service.log("one", ActivityType.USER)
        await service.log("two", ActivityType.USER)

        # Act
        removed = await service.clear_all(moderator)

        # Assert
        assert removed == 2
        activities, total = await service.list_activities(moderator)
        assert total == 1
        assert activities[0].type == ActivityType.DATA
        assert "Mo" in activities[0].description

    @pytest.mark.asyncio
    async def test_users_see_only_their_own_entries(self, unit_env):
        # Arrange
        service = await unit_env.get(ActivityService)
        ann = make_user().as_caller()
        bob = make_user().as_caller()
        await service.log("Ann did a thing", ActivityType.USER, user_id=ann.user_id)
        await service.log("Bob did a thing", ActivityType.USER, user_id=bob.user_id)

        # Act
        mine = await service.user_activities(ann, ann.user_id, 10)

        # Assert
        assert [a.description for a in mine] == ["Ann did a thing"]
        with pytest.raises(PermissionDeniedError):
            await service.user_activities(ann, bob.user_id, 10)

    @pytest.mark.asyncio
    async def test_clear_user_removes_only_that_users_entries(self, unit_env):
        # Arrange
        service = await unit_env.get(ActivityService)
        ann = make_user().as_caller()
        await service.log("Ann did a thing", ActivityType.USER, user_id=ann.user_id)
        await service.log("Anonymous thing", ActivityType.DATA)

        # Act
        removed = await service.clear_user(ann, ann.user_id)

        # Assert
        assert removed == 1
        moderator = make_user(role=UserRole.MODERATOR).as_caller()
        _, total = await service.list_activities(moderator)
        assert total == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [UserRole.USER, UserRole.BUSINESS_OWNER, UserRole.AUTHOR])
    async def test_dashboard_views_need_a_moderator(self, unit_env, role):
        service = await unit_env.get(ActivityService)
        caller = make_user(role=role).as_caller()

        with pytest.raises(PermissionDeniedError):
            await service.list_activities(caller)
        with pytest.raises(PermissionDeniedError):
            await service.recent_activities(caller, 5)
        with pytest.raises(PermissionDeniedError):
            await service.clear_all(caller)
