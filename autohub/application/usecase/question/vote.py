"""Vote use case.

Votes toggle: repeating a vote removes it, voting the other way moves it.
"""

from uuid import UUID

import logfire
from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.question.get_question import QuestionResponse
from autohub.domain.service import QuestionService, UserService
from autohub.domain.value import AnswerId, QuestionId, VotableType, VoteDirection


class VoteRequest(BaseModel):
    """Vote request."""

    votable_type: VotableType
    question_id: str  # UUID string
    answer_id: str | None = None  # Required when voting on an answer
    direction: VoteDirection
    user_id: str  # User ID from authenticated user

    def model_post_init(self, __context):
        """Validate that answer votes name their answer."""
        if self.votable_type == VotableType.ANSWER and not self.answer_id:
            raise ValueError("answer_id is required when voting on an answer")


class VoteUseCase(BaseUseCase):
    """Use case for voting on a question or one of its answers."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize vote use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: VoteRequest) -> QuestionResponse:
        """Execute vote flow.

        Returns:
            The question as committed, with the caller's resulting votes

        Raises:
            NotFoundError: If question, answer or user not found
            PermissionDeniedError: If user is suspended
            TransactionConflictError: If contention outlasts the retry budget
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        question_id = QuestionId(UUID(request.question_id))

        with logfire.span(
            "vote.execute",
            votable_type=request.votable_type.value,
            direction=request.direction.value,
        ):
            if request.votable_type == VotableType.QUESTION:
                question = await self.question_service.vote_on_question(
                    caller, question_id, request.direction
                )
            else:  # VotableType.ANSWER
                question = await self.question_service.vote_on_answer(
                    caller,
                    question_id,
                    AnswerId(UUID(request.answer_id)),
                    request.direction,
                )

            return QuestionResponse.from_question(question, caller.user_id)
