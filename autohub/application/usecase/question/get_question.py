"""Get question use case.

Viewing a question counts a view; the response models here are shared by
every question use case.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase
from autohub.domain.model import Answer, Question
from autohub.domain.service import QuestionService
from autohub.domain.value import QuestionId, UserId, VoteDirection


class AnswerResponse(BaseModel):
    """Answer as shown under a question."""

    answer_id: str
    body: str
    author_id: str
    author_name: str
    created_at: datetime
    accepted: bool
    upvotes: int
    downvotes: int
    my_vote: VoteDirection | None = None  # Viewer's vote, if authenticated

    @classmethod
    def from_answer(
        cls, answer: Answer, viewer_id: Optional[UserId] = None
    ) -> "AnswerResponse":
        return cls(
            answer_id=str(answer.id),
            body=answer.body,
            author_id=str(answer.author_id),
            author_name=answer.author_name,
            created_at=answer.created_at,
            accepted=answer.accepted,
            upvotes=answer.upvotes,
            downvotes=answer.downvotes,
            my_vote=answer.vote_of(viewer_id) if viewer_id else None,
        )


class QuestionResponse(BaseModel):
    """Question with its answers."""

    question_id: str
    title: str
    body: str
    tags: list[str]
    author_id: str
    author_name: str
    created_at: datetime
    views: int
    upvotes: int
    downvotes: int
    answer_count: int
    answers: list[AnswerResponse]
    my_vote: VoteDirection | None = None

    @classmethod
    def from_question(
        cls, question: Question, viewer_id: Optional[UserId] = None
    ) -> "QuestionResponse":
        return cls(
            question_id=str(question.id),
            title=question.title,
            body=question.body,
            tags=[tag.root for tag in question.tags],
            author_id=str(question.author_id),
            author_name=question.author_name,
            created_at=question.created_at,
            views=question.views,
            upvotes=question.upvotes,
            downvotes=question.downvotes,
            answer_count=question.answer_count,
            answers=[
                AnswerResponse.from_answer(answer, viewer_id)
                for answer in question.answers
            ],
            my_vote=question.vote_of(viewer_id) if viewer_id else None,
        )


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetQuestionUseCase(BaseUseCase):
    """Use case for opening a question, which counts one view."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: GetQuestionRequest) -> QuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If question doesn't exist
        """
        question = await self.question_service.record_view(
            QuestionId(UUID(request.question_id))
        )
        viewer_id = UserId(UUID(request.user_id)) if request.user_id else None
        return QuestionResponse.from_question(question, viewer_id)
