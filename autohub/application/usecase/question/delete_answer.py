"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.question.get_question import QuestionResponse
from autohub.domain.service import QuestionService, UserService
from autohub.domain.value import AnswerId, QuestionId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    question_id: str
    answer_id: str
    user_id: str


class DeleteAnswerUseCase(BaseUseCase):
    """Use case for removing an answer and its votes."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: DeleteAnswerRequest) -> QuestionResponse:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If question, answer or user not found
            PermissionDeniedError: If user is neither answer author nor moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        question = await self.question_service.delete_answer(
            caller,
            QuestionId(UUID(request.question_id)),
            AnswerId(UUID(request.answer_id)),
        )
        return QuestionResponse.from_question(question, caller.user_id)
