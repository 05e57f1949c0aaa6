"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.question.get_question import QuestionResponse
from autohub.domain.service import QuestionService, UserService
from autohub.domain.value import AnswerId, QuestionId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    question_id: str
    answer_id: str
    user_id: str


class AcceptAnswerUseCase(BaseUseCase):
    """Use case for accepting an answer, or un-accepting it on a second call."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: AcceptAnswerRequest) -> QuestionResponse:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If question, answer or user not found
            PermissionDeniedError: If user is neither question author nor staff
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        question = await self.question_service.toggle_accepted(
            caller,
            QuestionId(UUID(request.question_id)),
            AnswerId(UUID(request.answer_id)),
        )
        return QuestionResponse.from_question(question, caller.user_id)
