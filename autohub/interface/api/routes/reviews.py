"""Review routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from autohub.application.usecase.auth import GetCurrentUserUseCase
from autohub.application.usecase.review import (
    AddReviewRequest,
    AddReviewUseCase,
    DeleteReviewRequest,
    DeleteReviewResponse,
    DeleteReviewUseCase,
    ListAllReviewsRequest,
    ListAllReviewsResponse,
    ListAllReviewsUseCase,
    ListReviewsRequest,
    ListReviewsResponse,
    ListReviewsUseCase,
    ReviewResponse,
)
from autohub.config import PaginationSettings
from autohub.domain.value import ReviewItemType
from autohub.interface.api.session import authenticate, page_limit

router = APIRouter(prefix="/reviews", tags=["reviews"], route_class=DishkaRoute)


class AddReviewAPIRequest(BaseModel):
    """API request for reviewing a business or a vehicle."""

    item_type: ReviewItemType
    item_id: UUID
    rating: int = Field(ge=1, le=5)
    text: str = Field(min_length=1, max_length=5000)


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def add_review(
    request: AddReviewAPIRequest,
    add_review_use_case: FromDishka[AddReviewUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ReviewResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await add_review_use_case.execute(
        AddReviewRequest(
            item_type=request.item_type,
            item_id=str(request.item_id),
            rating=request.rating,
            text=request.text,
            user_id=user.user_id,
        )
    )


@router.get("", response_model=ListAllReviewsResponse)
async def list_all_reviews(
    list_all_reviews_use_case: FromDishka[ListAllReviewsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    pagination: FromDishka[PaginationSettings],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListAllReviewsResponse:
    """Every review, newest first. Moderators only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await list_all_reviews_use_case.execute(
        ListAllReviewsRequest(
            limit=page_limit(limit, pagination), offset=offset, user_id=user.user_id
        )
    )


@router.get("/{item_type}/{item_id}", response_model=ListReviewsResponse)
async def list_item_reviews(
    item_type: ReviewItemType,
    item_id: UUID,
    list_reviews_use_case: FromDishka[ListReviewsUseCase],
) -> ListReviewsResponse:
    """Reviews of one item with its average rating."""
    return await list_reviews_use_case.execute(
        ListReviewsRequest(item_type=item_type, item_id=str(item_id))
    )


@router.delete("/{review_id}", response_model=DeleteReviewResponse)
async def delete_review(
    review_id: UUID,
    delete_review_use_case: FromDishka[DeleteReviewUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteReviewResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await delete_review_use_case.execute(
        DeleteReviewRequest(review_id=str(review_id), user_id=user.user_id)
    )
