"""Question and answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from autohub.application.usecase.auth import GetCurrentUserUseCase
from autohub.application.usecase.question import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    AnswerResponse,
    AskQuestionRequest,
    AskQuestionUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    PostAnswerRequest,
    PostAnswerUseCase,
    QuestionResponse,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
    VoteRequest,
    VoteUseCase,
)
from autohub.config import PaginationSettings
from autohub.domain.repository import QuestionSortOrder
from autohub.domain.value import VotableType, VoteDirection
from autohub.interface.api.session import authenticate, optional_user, page_limit

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class AskQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1, max_length=10000)
    tags: list[str] = Field(default_factory=list, max_length=5)


class UpdateQuestionAPIRequest(BaseModel):
    """Fields left out are not changed."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    body: str | None = Field(default=None, min_length=1, max_length=10000)
    tags: list[str] | None = Field(default=None, max_length=5)


class AnswerAPIRequest(BaseModel):
    body: str = Field(min_length=1, max_length=10000)


class VoteAPIRequest(BaseModel):
    direction: VoteDirection


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    pagination: FromDishka[PaginationSettings],
    sort: QuestionSortOrder = Query(default=QuestionSortOrder.NEWEST),
    tag: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> ListQuestionsResponse:
    """List questions, optionally filtered by tag."""
    return await list_questions_use_case.execute(
        ListQuestionsRequest(
            sort=sort,
            tag=tag,
            limit=page_limit(limit, pagination),
            offset=offset,
        )
    )


@router.post("", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED)
async def ask_question(
    request: AskQuestionAPIRequest,
    ask_question_use_case: FromDishka[AskQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QuestionResponse:
    """Ask a new question. Requires authentication."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await ask_question_use_case.execute(
        AskQuestionRequest(
            title=request.title,
            body=request.body,
            tags=request.tags,
            user_id=user.user_id,
        )
    )


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QuestionResponse:
    """Open a question with its answers.

    Counts one view. Signed-in viewers also see their own votes.
    """
    user = await optional_user(auth_token, get_current_user_use_case)
    return await get_question_use_case.execute(
        GetQuestionRequest(
            question_id=str(question_id),
            user_id=user.user_id if user else None,
        )
    )


@router.patch("/{question_id}", response_model=QuestionResponse)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QuestionResponse:
    """Edit a question. Only the author or a moderator can edit."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await update_question_use_case.execute(
        UpdateQuestionRequest(
            question_id=str(question_id),
            title=request.title,
            body=request.body,
            tags=request.tags,
            user_id=user.user_id,
        )
    )


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteQuestionResponse:
    """Delete a question and its answers."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await delete_question_use_case.execute(
        DeleteQuestionRequest(question_id=str(question_id), user_id=user.user_id)
    )


@router.post("/{question_id}/vote", response_model=QuestionResponse)
async def vote_on_question(
    question_id: UUID,
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QuestionResponse:
    """Vote on a question.

    Repeating a vote removes it; voting the other way switches it.
    """
    user = await authenticate(auth_token, get_current_user_use_case)
    return await vote_use_case.execute(
        VoteRequest(
            votable_type=VotableType.QUESTION,
            question_id=str(question_id),
            direction=request.direction,
            user_id=user.user_id,
        )
    )


@router.post(
    "/{question_id}/answers",
    response_model=AnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_answer(
    question_id: UUID,
    request: AnswerAPIRequest,
    post_answer_use_case: FromDishka[PostAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AnswerResponse:
    """Answer a question. Requires authentication."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await post_answer_use_case.execute(
        PostAnswerRequest(
            question_id=str(question_id), body=request.body, user_id=user.user_id
        )
    )


@router.post("/{question_id}/answers/{answer_id}/vote", response_model=QuestionResponse)
async def vote_on_answer(
    question_id: UUID,
    answer_id: UUID,
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QuestionResponse:
    """Vote on an answer, with the same toggle rules as question votes."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await vote_use_case.execute(
        VoteRequest(
            votable_type=VotableType.ANSWER,
            question_id=str(question_id),
            answer_id=str(answer_id),
            direction=request.direction,
            user_id=user.user_id,
        )
    )


@router.post(
    "/{question_id}/answers/{answer_id}/accept", response_model=QuestionResponse
)
async def accept_answer(
    question_id: UUID,
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QuestionResponse:
    """Mark an answer as accepted, clearing any previously accepted one."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(
            question_id=str(question_id),
            answer_id=str(answer_id),
            user_id=user.user_id,
        )
    )


@router.delete("/{question_id}/answers/{answer_id}", response_model=QuestionResponse)
async def delete_answer(
    question_id: UUID,
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> QuestionResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await delete_answer_use_case.execute(
        DeleteAnswerRequest(
            question_id=str(question_id),
            answer_id=str(answer_id),
            user_id=user.user_id,
        )
    )
