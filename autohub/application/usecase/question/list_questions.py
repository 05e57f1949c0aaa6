"""List questions use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from autohub.application.usecase.base import BaseUseCase
from autohub.domain.repository import QuestionSortOrder
from autohub.domain.service import QuestionService
from autohub.domain.value import TagName


class QuestionListItem(BaseModel):
    """Question list item in response."""

    question_id: str
    title: str
    tags: list[str]
    author_id: str
    author_name: str
    created_at: datetime
    views: int
    upvotes: int
    downvotes: int
    answer_count: int
    has_accepted_answer: bool


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    tag: str | None = None  # Filter by tag name
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionListItem]
    total: int
    limit: int
    offset: int


class ListQuestionsUseCase(BaseUseCase):
    """Use case for listing questions with filtering and pagination."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request with filters and pagination

        Returns:
            One page of questions and the total matching count
        """
        with logfire.span(
            "list_questions.execute",
            sort=request.sort.value,
            tag=request.tag,
            limit=request.limit,
            offset=request.offset,
        ):
            tag_filter = TagName.from_label(request.tag) if request.tag else None

            questions, total = await self.question_service.list_questions(
                sort=request.sort,
                tag=tag_filter,
                limit=request.limit,
                offset=request.offset,
            )

            items = [
                QuestionListItem(
                    question_id=str(q.id),
                    title=q.title,
                    tags=[tag.root for tag in q.tags],
                    author_id=str(q.author_id),
                    author_name=q.author_name,
                    created_at=q.created_at,
                    views=q.views,
                    upvotes=q.upvotes,
                    downvotes=q.downvotes,
                    answer_count=q.answer_count,
                    has_accepted_answer=q.accepted_answer is not None,
                )
                for q in questions
            ]

            logfire.info("Questions listed", count=len(items), total=total)

            return ListQuestionsResponse(
                questions=items,
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
