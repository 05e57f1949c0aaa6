"""Ask question use case."""

import logfire
from pydantic import BaseModel, Field

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.question.get_question import QuestionResponse
from autohub.domain.service import QuestionService, UserService
from autohub.domain.value import TagName


class AskQuestionRequest(BaseModel):
    """Ask question request."""

    title: str
    body: str
    tags: list[str] = Field(default_factory=list)  # Free text, normalised to tag names
    user_id: str  # User ID from authenticated user


class AskQuestionUseCase(BaseUseCase):
    """Use case for asking a new question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize ask question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: AskQuestionRequest) -> QuestionResponse:
        """Execute ask question flow.

        Raises:
            NotFoundError: If user not found
            PermissionDeniedError: If user is suspended
            ValidationError: If title or body is blank
        """
        caller = await resolve_caller(self.user_service, request.user_id)

        with logfire.span("ask_question.execute", tags=request.tags):
            tags = [TagName.from_label(label) for label in request.tags if label.strip()]
            question = await self.question_service.ask_question(
                caller, request.title, request.body, tags
            )
            return QuestionResponse.from_question(question, caller.user_id)
