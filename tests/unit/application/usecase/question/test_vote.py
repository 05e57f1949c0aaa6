"""Unit tests for VoteUseCase."""

from uuid import uuid4

import pydantic
import pytest

from autohub.application.usecase.question import VoteRequest, VoteUseCase
from autohub.domain.error import NotFoundError
from autohub.domain.repository import QuestionRepository, UserRepository
from autohub.domain.service import QuestionService, UserService
from autohub.domain.value import VotableType, VoteDirection
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestVoteUseCase:
    """Tests for VoteUseCase."""

    @pytest.mark.asyncio
    async def test_question_vote_reports_callers_vote(self, unit_env):
        """The response carries the caller's vote and the new counts."""
        # Arrange
        use_case = await unit_env.get(VoteUseCase)
        users = await unit_env.get(UserRepository)
        questions = await unit_env.get(QuestionRepository)
        voter = await users.save(make_user())
        question = await questions.save(make_question(make_user()))

        # Act
        response = await use_case.execute(
            VoteRequest(
                votable_type=VotableType.QUESTION,
                question_id=str(question.id),
                direction=VoteDirection.DOWN,
                user_id=str(voter.id),
            )
        )

        # Assert
        assert response.my_vote == VoteDirection.DOWN
        assert response.downvotes == 1
        assert response.upvotes == 0

    @pytest.mark.asyncio
    async def test_answer_vote_routes_to_answer(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        use_case = VoteUseCase(
            question_service=question_service,
            user_service=await unit_env.get(UserService),
        )
        users = await unit_env.get(UserRepository)
        questions = await unit_env.get(QuestionRepository)
        author = await users.save(make_user())
        voter = await users.save(make_user())
        question = await questions.save(make_question(author))
        answer = await question_service.post_answer(
            author.as_caller(), question.id, "Check the plugs."
        )
        answer_id = answer.id

        # Act
        response = await use_case.execute(
            VoteRequest(
                votable_type=VotableType.ANSWER,
                question_id=str(question.id),
                answer_id=str(answer_id),
                direction=VoteDirection.UP,
                user_id=str(voter.id),
            )
        )

        # Assert
        assert response.my_vote is None
        assert response.upvotes == 0
        assert response.answers[0].my_vote == VoteDirection.UP
        assert response.answers[0].upvotes == 1

    @pytest.mark.asyncio
    async def test_unknown_user_is_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(VoteUseCase)
        questions = await unit_env.get(QuestionRepository)
        question = await questions.save(make_question(make_user()))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                VoteRequest(
                    votable_type=VotableType.QUESTION,
                    question_id=str(question.id),
                    direction=VoteDirection.UP,
                    user_id=str(uuid4()),
                )
            )

    def test_answer_vote_needs_answer_id(self):
        with pytest.raises(pydantic.ValidationError):
            VoteRequest(
                votable_type=VotableType.ANSWER,
                question_id=str(uuid4()),
                direction=VoteDirection.UP,
                user_id=str(uuid4()),
            )
