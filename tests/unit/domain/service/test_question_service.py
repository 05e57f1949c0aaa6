"""Unit tests for QuestionService."""

import asyncio
from uuid import uuid4

import pytest

from autohub.domain.error import (
    NotFoundError,
    PermissionDeniedError,
    TransactionConflictError,
    ValidationError,
)
from autohub.domain.repository import ActivityRepository, QuestionRepository
from autohub.domain.service import ActivityService, QuestionService
from autohub.domain.value import (
    ActivityType,
    AnswerId,
    QuestionId,
    TagName,
    UserRole,
    UserStatus,
    VoteDirection,
)
from autohub.persistence.repository.inmemory import InMemoryQuestionRepository
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


async def _seed_question(unit_env):
    author = make_user(name="Asker")
    question = make_question(author)
    repo = await unit_env.get(QuestionRepository)
    await repo.save(question)
    return author, question


class TestAskQuestion:
    """Tests for ask_question."""

    @pytest.mark.asyncio
    async def test_ask_question_starts_empty_and_logs_activity(self, unit_env):
        """A new question has no answers, votes or views."""
        # Arrange
        service = await unit_env.get(QuestionService)
        activity_repo = await unit_env.get(ActivityRepository)
        author = make_user(name="Asker")

        # Act
        question = await service.ask_question(
            author.as_caller(),
            "  Brake squeal  ",
            "Only when cold.",
            [TagName("brakes"), TagName("brakes")],
        )

        # Assert
        assert question.title == "Brake squeal"
        assert question.tags == [TagName("brakes")]
        assert question.answers == []
        assert question.views == 0
        assert question.version == 0
        entries = await activity_repo.find_page(type=ActivityType.QUESTION)
        assert len(entries) == 1
        assert entries[0].related_id == str(question.id)

    @pytest.mark.asyncio
    async def test_blank_body_is_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.ask_question(make_user().as_caller(), "Title", "   ", [])

    @pytest.mark.asyncio
    async def test_suspended_user_cannot_ask(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        suspended = make_user(status=UserStatus.SUSPENDED)

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.ask_question(suspended.as_caller(), "Title", "Body", [])


class TestVoting:
    """Tests for vote_on_question and vote_on_answer."""

    @pytest.mark.asyncio
    async def test_vote_toggle_on_question(self, unit_env):
        """Up, up again, then down: none, then a single downvote."""
        # Arrange
        service = await unit_env.get(QuestionService)
        _, question = await _seed_question(unit_env)
        voter = make_user().as_caller()

        # Act
        after_up = await service.vote_on_question(voter, question.id, VoteDirection.UP)
        after_repeat = await service.vote_on_question(voter, question.id, VoteDirection.UP)
        after_down = await service.vote_on_question(voter, question.id, VoteDirection.DOWN)

        # Assert
        assert after_up.upvotes == 1
        assert after_repeat.upvotes == 0
        assert after_down.upvotes == 0
        assert after_down.downvoted_by == [voter.user_id]
        assert after_down.version == 3

    @pytest.mark.asyncio
    async def test_author_may_vote_on_own_question(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        author, question = await _seed_question(unit_env)

        # Act
        result = await service.vote_on_question(
            author.as_caller(), question.id, VoteDirection.UP
        )

        # Assert
        assert result.upvoted_by == [author.id]

    @pytest.mark.asyncio
    async def test_vote_on_answer_touches_only_that_answer(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        _, question = await _seed_question(unit_env)
        first = await service.post_answer(make_user().as_caller(), question.id, "One")
        second = await service.post_answer(make_user().as_caller(), question.id, "Two")
        voter = make_user().as_caller()

        # Act
        result = await service.vote_on_answer(
            voter, question.id, second.id, VoteDirection.DOWN
        )

        # Assert
        assert result.find_answer(first.id).downvotes == 0
        assert result.find_answer(second.id).downvoted_by == [voter.user_id]
        assert result.upvotes == 0 and result.downvotes == 0

    @pytest.mark.asyncio
    async def test_vote_on_missing_answer_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        _, question = await _seed_question(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer"):
            await service.vote_on_answer(
                make_user().as_caller(), question.id, AnswerId(uuid4()), VoteDirection.UP
            )

    @pytest.mark.asyncio
    async def test_vote_on_missing_question_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Question"):
            await service.vote_on_question(
                make_user().as_caller(), QuestionId(uuid4()), VoteDirection.UP
            )

    @pytest.mark.asyncio
    async def test_concurrent_votes_are_all_counted(self, unit_env):
        """Twenty users upvoting at once all end up in the upvote list."""
        # Arrange
        service = await unit_env.get(QuestionService)
        repo = await unit_env.get(QuestionRepository)
        _, question = await _seed_question(unit_env)
        voters = [make_user().as_caller() for _ in range(20)]
        service.max_attempts = 50

        # Act
        await asyncio.gather(
            *(
                service.vote_on_question(voter, question.id, VoteDirection.UP)
                for voter in voters
            )
        )

        # Assert
        stored = await repo.find_by_id(question.id)
        assert stored.upvotes == 20
        assert set(stored.upvoted_by) == {v.user_id for v in voters}
        assert stored.version == 20

    @pytest.mark.asyncio
    async def test_unguarded_load_and_save_loses_votes(self, unit_env):
        """Without the version check, concurrent voters overwrite each other."""
        # Arrange
        repo = await unit_env.get(QuestionRepository)
        _, question = await _seed_question(unit_env)
        voters = [make_user().as_caller() for _ in range(20)]

        async def vote_without_version_check(voter):
            snapshot = await repo.find_by_id(question.id)
            await repo.save(snapshot.with_vote(voter.user_id, VoteDirection.UP))

        # Act
        await asyncio.gather(*(vote_without_version_check(v) for v in voters))

        # Assert
        stored = await repo.find_by_id(question.id)
        assert stored.upvotes < 20

    @pytest.mark.asyncio
    async def test_concurrent_answers_are_all_kept(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        repo = await unit_env.get(QuestionRepository)
        _, question = await _seed_question(unit_env)
        service.max_attempts = 50

        # Act
        await asyncio.gather(
            *(
                service.post_answer(make_user().as_caller(), question.id, f"Answer {i}")
                for i in range(10)
            )
        )

        # Assert
        stored = await repo.find_by_id(question.id)
        assert stored.answer_count == 10


class AlwaysStaleQuestionRepository(InMemoryQuestionRepository):
    """Every commit loses the race."""

    async def commit_if_unchanged(self, question, expected_version):
        return False


class TestRetryExhaustion:
    """Tests for the optimistic retry budget."""

    @pytest.mark.asyncio
    async def test_gives_up_with_transaction_conflict(self, unit_env):
        # Arrange
        repo = AlwaysStaleQuestionRepository()
        service = QuestionService(
            question_repository=repo,
            activity_service=await unit_env.get(ActivityService),
            max_attempts=3,
        )
        author = make_user()
        question = make_question(author)
        await repo.save(question)

        # Act & Assert
        with pytest.raises(TransactionConflictError) as exc_info:
            await service.vote_on_question(
                make_user().as_caller(), question.id, VoteDirection.UP
            )
        assert exc_info.value.attempts == 3
        stored = await repo.find_by_id(question.id)
        assert stored.upvotes == 0


class TestAcceptAnswer:
    """Tests for toggle_accepted."""

    @pytest.mark.asyncio
    async def test_accepting_clears_previous_acceptance(self, unit_env):
        """Only the most recently accepted answer stays accepted."""
        # Arrange
        service = await unit_env.get(QuestionService)
        author, question = await _seed_question(unit_env)
        first = await service.post_answer(make_user().as_caller(), question.id, "One")
        second = await service.post_answer(make_user().as_caller(), question.id, "Two")

        # Act
        await service.toggle_accepted(author.as_caller(), question.id, first.id)
        result = await service.toggle_accepted(author.as_caller(), question.id, second.id)

        # Assert
        assert result.find_answer(first.id).accepted is False
        assert result.find_answer(second.id).accepted is True
        assert result.accepted_answer.id == second.id

    @pytest.mark.asyncio
    async def test_accepting_twice_unaccepts(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        author, question = await _seed_question(unit_env)
        answer = await service.post_answer(make_user().as_caller(), question.id, "One")

        # Act
        await service.toggle_accepted(author.as_caller(), question.id, answer.id)
        result = await service.toggle_accepted(author.as_caller(), question.id, answer.id)

        # Assert
        assert result.accepted_answer is None

    @pytest.mark.asyncio
    async def test_other_users_cannot_accept(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        _, question = await _seed_question(unit_env)
        answerer = make_user().as_caller()
        answer = await service.post_answer(answerer, question.id, "One")

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.toggle_accepted(answerer, question.id, answer.id)

    @pytest.mark.asyncio
    async def test_unknown_answer_raises_not_found_and_changes_nothing(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        repo = await unit_env.get(QuestionRepository)
        author, question = await _seed_question(unit_env)
        answer = await service.post_answer(make_user().as_caller(), question.id, "One")
        before = await repo.find_by_id(question.id)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer"):
            await service.toggle_accepted(
                author.as_caller(), question.id, AnswerId(uuid4())
            )
        stored = await repo.find_by_id(question.id)
        assert stored.answers == before.answers
        assert stored.find_answer(answer.id).accepted is False
        assert stored.version == before.version

    @pytest.mark.asyncio
    async def test_staff_can_accept(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        _, question = await _seed_question(unit_env)
        answer = await service.post_answer(make_user().as_caller(), question.id, "One")
        author_role = make_user(role=UserRole.AUTHOR).as_caller()

        # Act
        result = await service.toggle_accepted(author_role, question.id, answer.id)

        # Assert
        assert result.accepted_answer.id == answer.id


class TestDeleteAnswer:
    """Tests for delete_answer."""

    @pytest.mark.asyncio
    async def test_delete_answer_removes_it_and_its_votes(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        _, question = await _seed_question(unit_env)
        answerer = make_user().as_caller()
        keep = await service.post_answer(make_user().as_caller(), question.id, "Keep")
        doomed = await service.post_answer(answerer, question.id, "Doomed")
        await service.vote_on_answer(
            make_user().as_caller(), question.id, doomed.id, VoteDirection.UP
        )

        # Act
        result = await service.delete_answer(answerer, question.id, doomed.id)

        # Assert
        assert [a.id for a in result.answers] == [keep.id]
        assert result.answer_count == 1

    @pytest.mark.asyncio
    async def test_moderator_can_delete_any_answer(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        _, question = await _seed_question(unit_env)
        answer = await service.post_answer(make_user().as_caller(), question.id, "Spam")
        moderator = make_user(role=UserRole.MODERATOR).as_caller()

        # Act
        result = await service.delete_answer(moderator, question.id, answer.id)

        # Assert
        assert result.answers == []

    @pytest.mark.asyncio
    async def test_unknown_answer_raises_not_found_and_changes_nothing(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        repo = await unit_env.get(QuestionRepository)
        _, question = await _seed_question(unit_env)
        await service.post_answer(make_user().as_caller(), question.id, "Keep")
        before = await repo.find_by_id(question.id)
        moderator = make_user(role=UserRole.MODERATOR).as_caller()

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer"):
            await service.delete_answer(moderator, question.id, AnswerId(uuid4()))
        stored = await repo.find_by_id(question.id)
        assert stored.answers == before.answers
        assert stored.answer_count == 1
        assert stored.version == before.version

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete_answer(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        _, question = await _seed_question(unit_env)
        answer = await service.post_answer(make_user().as_caller(), question.id, "Mine")

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.delete_answer(make_user().as_caller(), question.id, answer.id)


class FailingViewsQuestionRepository(InMemoryQuestionRepository):
    """View increments always fail."""

    async def increment_views(self, question_id):
        raise RuntimeError("connection reset")


class TestRecordView:
    """Tests for record_view."""

    @pytest.mark.asyncio
    async def test_each_view_adds_one(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        _, question = await _seed_question(unit_env)

        # Act
        await service.record_view(question.id)
        result = await service.record_view(question.id)

        # Assert
        assert result.views == 2

    @pytest.mark.asyncio
    async def test_view_does_not_bump_version(self, unit_env):
        """Views never make a concurrent voter retry."""
        # Arrange
        service = await unit_env.get(QuestionService)
        _, question = await _seed_question(unit_env)

        # Act
        result = await service.record_view(question.id)

        # Assert
        assert result.version == question.version

    @pytest.mark.asyncio
    async def test_failed_increment_falls_back_to_plain_read(self, unit_env):
        # Arrange
        repo = FailingViewsQuestionRepository()
        service = QuestionService(
            question_repository=repo,
            activity_service=await unit_env.get(ActivityService),
        )
        question = make_question(make_user())
        await repo.save(question)

        # Act
        result = await service.record_view(question.id)

        # Assert
        assert result.id == question.id
        assert result.views == 0

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.record_view(QuestionId(uuid4()))


class TestUpdateAndDeleteQuestion:
    """Tests for update_question and delete_question."""

    @pytest.mark.asyncio
    async def test_update_keeps_votes_and_answers(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        author, question = await _seed_question(unit_env)
        await service.vote_on_question(make_user().as_caller(), question.id, VoteDirection.UP)
        await service.post_answer(make_user().as_caller(), question.id, "An answer")

        # Act
        result = await service.update_question(
            author.as_caller(), question.id, title="Engine knock at 3000 rpm"
        )

        # Assert
        assert result.title == "Engine knock at 3000 rpm"
        assert result.upvotes == 1
        assert result.answer_count == 1

    @pytest.mark.asyncio
    async def test_stranger_cannot_update(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        _, question = await _seed_question(unit_env)

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.update_question(make_user().as_caller(), question.id, title="Mine now")

    @pytest.mark.asyncio
    async def test_delete_removes_question(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        repo = await unit_env.get(QuestionRepository)
        author, question = await _seed_question(unit_env)

        # Act
        await service.delete_question(author.as_caller(), question.id)

        # Assert
        assert await repo.find_by_id(question.id) is None

    @pytest.mark.asyncio
    async def test_author_role_cannot_delete_others_question(self, unit_env):
        """Authors may edit other questions but only moderators delete them."""
        # Arrange
        service = await unit_env.get(QuestionService)
        _, question = await _seed_question(unit_env)

        # Act & Assert
        with pytest.raises(PermissionDeniedError):
            await service.delete_question(
                make_user(role=UserRole.AUTHOR).as_caller(), question.id
            )
