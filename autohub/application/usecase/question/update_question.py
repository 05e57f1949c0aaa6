"""Update question use case."""

from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.question.get_question import QuestionResponse
from autohub.domain.service import QuestionService, UserService
from autohub.domain.value import QuestionId, TagName


class UpdateQuestionRequest(BaseModel):
    """Update question request. Omitted fields are left unchanged."""

    question_id: str
    title: str | None = None
    body: str | None = None
    tags: list[str] | None = None
    user_id: str


class UpdateQuestionUseCase(BaseUseCase):
    """Use case for editing the content of a question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionResponse:
        """Execute update question flow.

        Raises:
            NotFoundError: If question or user not found
            PermissionDeniedError: If user is neither author nor staff
            ValidationError: If title or body is blank
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        tags = (
            [TagName.from_label(label) for label in request.tags if label.strip()]
            if request.tags is not None
            else None
        )
        question = await self.question_service.update_question(
            caller,
            QuestionId(UUID(request.question_id)),
            title=request.title,
            body=request.body,
            tags=tags,
        )
        return QuestionResponse.from_question(question, caller.user_id)
