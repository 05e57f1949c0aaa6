"""Unit tests for UserService."""

import pytest

from autohub.domain.error import BusinessRuleViolationError, PermissionDeniedError
from autohub.domain.model import SecuritySettings
from autohub.domain.repository import QuestionRepository, UserRepository
from autohub.domain.service import ActivityService, QuestionService, UserService
from autohub.domain.value import UserRole, UserStatus, VoteDirection
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


async def _user_service(unit_env, seed_admin_emails=None) -> UserService:
    return UserService(
        await unit_env.get(UserRepository),
        await unit_env.get(ActivityService),
        await unit_env.get(QuestionService),
        seed_admin_emails=seed_admin_emails,
    )


class TestRegister:
    @pytest.mark.asyncio
    async def test_new_user_gets_configured_default_role(self, unit_env):
        # Arrange
        service = await _user_service(unit_env)
        security = SecuritySettings(default_user_role=UserRole.BUSINESS_OWNER)

        # Act
        user = await service.register(" Ann ", "Ann@Example.com", security)

        # Assert
        assert user.name == "Ann"
        assert user.email == "ann@example.com"
        assert user.role == UserRole.BUSINESS_OWNER

    @pytest.mark.asyncio
    async def test_closed_registration_is_refused(self, unit_env):
        service = await _user_service(unit_env)

        with pytest.raises(BusinessRuleViolationError, match="disabled"):
            await service.register(
                "Ann", "ann@example.com", SecuritySettings(allow_registration=False)
            )

    @pytest.mark.asyncio
    async def test_seed_admin_registers_while_closed(self, unit_env):
        # Arrange
        service = await _user_service(unit_env, seed_admin_emails=["Root@AutoHub.test"])

        # Act
        user = await service.register(
            "Root", "root@autohub.test", SecuritySettings(allow_registration=False)
        )

        # Assert
        assert user.role == UserRole.ADMINISTRATOR

    @pytest.mark.asyncio
    async def test_duplicate_email_is_refused(self, unit_env):
        # Arrange
        service = await _user_service(unit_env)
        await service.register("Ann", "ann@example.com", SecuritySettings())

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="already registered"):
            await service.register("Ann Again", "ANN@example.com", SecuritySettings())


class TestAdministration:
    @pytest.mark.asyncio
    async def test_user_may_rename_self_but_not_change_role(self, unit_env):
        # Arrange
        service = await _user_service(unit_env)
        repo = await unit_env.get(UserRepository)
        ann = await repo.save(make_user(name="Ann"))

        # Act
        renamed = await service.update_user(ann.as_caller(), ann.id, name="Annie")

        # Assert
        assert renamed.name == "Annie"
        with pytest.raises(PermissionDeniedError):
            await service.update_user(ann.as_caller(), ann.id, role=UserRole.ADMINISTRATOR)

    @pytest.mark.asyncio
    async def test_administrator_suspends_user(self, unit_env):
        # Arrange
        service = await _user_service(unit_env)
        repo = await unit_env.get(UserRepository)
        ann = await repo.save(make_user())
        admin = make_user(role=UserRole.ADMINISTRATOR).as_caller()

        # Act
        updated = await service.update_user(admin, ann.id, status=UserStatus.SUSPENDED)

        # Assert
        assert updated.status == UserStatus.SUSPENDED
        assert (await service.get_caller(ann.id)).status == UserStatus.SUSPENDED

    @pytest.mark.asyncio
    async def test_create_and_delete_user(self, unit_env):
        # Arrange
        service = await _user_service(unit_env)
        admin = make_user(role=UserRole.ADMINISTRATOR).as_caller()

        # Act
        created = await service.create_user(
            admin, "Mo", "mo@autohub.test", UserRole.MODERATOR
        )
        await service.delete_user(admin, created.id)

        # Assert
        assert created.verified is True
        _, total = await service.list_users(admin)
        assert total == 0

    @pytest.mark.asyncio
    async def test_delete_user_withdraws_answers_and_votes(self, unit_env):
        """Counters and version of other questions follow the removal."""
        # Arrange
        service = await _user_service(unit_env)
        questions = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        users = await unit_env.get(UserRepository)
        admin = make_user(role=UserRole.ADMINISTRATOR).as_caller()
        leaving = await users.save(make_user(name="Leaving"))
        staying = make_user(name="Staying").as_caller()

        other = make_question(make_user(name="Asker"))
        await question_repo.save(other)
        kept = await questions.post_answer(staying, other.id, "Check the plugs")
        gone = await questions.post_answer(leaving.as_caller(), other.id, "Buy a new car")
        await questions.vote_on_question(leaving.as_caller(), other.id, VoteDirection.UP)
        await questions.vote_on_answer(
            leaving.as_caller(), other.id, kept.id, VoteDirection.DOWN
        )
        await questions.vote_on_answer(staying, other.id, gone.id, VoteDirection.UP)
        own = make_question(leaving, title="My own question")
        await question_repo.save(own)
        before = await question_repo.find_by_id(other.id)

        # Act
        await service.delete_user(admin, leaving.id)

        # Assert
        after = await question_repo.find_by_id(other.id)
        assert after.upvotes == 0
        assert after.answer_count == 1
        assert after.answers[0].id == kept.id
        assert after.answers[0].downvotes == 0
        assert after.version == before.version + 1
        assert await question_repo.find_by_id(own.id) is None
        assert await users.find_by_id(leaving.id) is None

    @pytest.mark.asyncio
    async def test_moderator_cannot_list_users(self, unit_env):
        service = await _user_service(unit_env)

        with pytest.raises(PermissionDeniedError):
            await service.list_users(make_user(role=UserRole.MODERATOR).as_caller())


class TestPromotion:
    @pytest.mark.asyncio
    async def test_plain_user_is_promoted(self, unit_env):
        service = await _user_service(unit_env)
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user())

        promoted = await service.promote_to_business_owner(user.id)

        assert promoted.role == UserRole.BUSINESS_OWNER

    @pytest.mark.asyncio
    async def test_staff_keep_their_role(self, unit_env):
        service = await _user_service(unit_env)
        repo = await unit_env.get(UserRepository)
        author = await repo.save(make_user(role=UserRole.AUTHOR))

        kept = await service.promote_to_business_owner(author.id)

        assert kept.role == UserRole.AUTHOR
