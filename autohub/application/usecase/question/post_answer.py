"""Post answer use case."""

from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.question.get_question import AnswerResponse
from autohub.domain.service import QuestionService, UserService
from autohub.domain.value import QuestionId


class PostAnswerRequest(BaseModel):
    """Post answer request."""

    question_id: str
    body: str
    user_id: str


class PostAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: PostAnswerRequest) -> AnswerResponse:
        """Execute post answer flow.

        Raises:
            NotFoundError: If question or user not found
            PermissionDeniedError: If user is suspended
            ValidationError: If body is blank
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        answer = await self.question_service.post_answer(
            caller, QuestionId(UUID(request.question_id)), request.body
        )
        return AnswerResponse.from_answer(answer, caller.user_id)
