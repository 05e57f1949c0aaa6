"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.domain.service import QuestionService, UserService
from autohub.domain.value import QuestionId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str
    user_id: str


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    success: bool
    message: str


class DeleteQuestionUseCase(BaseUseCase):
    """Use case for deleting a question with its answers and votes."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Execute delete question flow.

        Raises:
            NotFoundError: If question or user not found
            PermissionDeniedError: If user is neither author nor moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        await self.question_service.delete_question(
            caller, QuestionId(UUID(request.question_id))
        )
        return DeleteQuestionResponse(success=True, message="Question deleted")
