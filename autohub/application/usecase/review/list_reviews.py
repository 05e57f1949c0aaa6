"""List reviews use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.review.add_review import ReviewResponse
from autohub.domain.service import ReviewService, UserService
from autohub.domain.value import ReviewItemType


class ListReviewsRequest(BaseModel):
    """Reviews of one item."""

    item_type: ReviewItemType
    item_id: str


class ListReviewsResponse(BaseModel):
    reviews: list[ReviewResponse]
    average_rating: float
    review_count: int


class ListReviewsUseCase(BaseUseCase):
    """Use case for the reviews section of an item page."""

    def __init__(self, review_service: ReviewService) -> None:
        self.review_service = review_service

    async def execute(self, request: ListReviewsRequest) -> ListReviewsResponse:
        reviews = await self.review_service.list_for_item(
            request.item_type, UUID(request.item_id)
        )
        count = len(reviews)
        average = round(sum(r.rating for r in reviews) / count, 2) if count else 0.0
        return ListReviewsResponse(
            reviews=[ReviewResponse.from_review(r) for r in reviews],
            average_rating=average,
            review_count=count,
        )


class ListAllReviewsRequest(BaseModel):
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    user_id: str


class ListAllReviewsResponse(BaseModel):
    reviews: list[ReviewResponse]
    total: int
    limit: int
    offset: int


class ListAllReviewsUseCase(BaseUseCase):
    """Use case for the moderators' review table."""

    def __init__(self, review_service: ReviewService, user_service: UserService) -> None:
        self.review_service = review_service
        self.user_service = user_service

    async def execute(self, request: ListAllReviewsRequest) -> ListAllReviewsResponse:
        """Execute list all reviews flow.

        Raises:
            PermissionDeniedError: If user is not a moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        reviews, total = await self.review_service.list_all(
            caller, limit=request.limit, offset=request.offset
        )
        return ListAllReviewsResponse(
            reviews=[ReviewResponse.from_review(r) for r in reviews],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
