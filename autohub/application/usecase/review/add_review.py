"""Add review use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.domain.model import Review
from autohub.domain.service import ReviewService, UserService
from autohub.domain.value import ReviewItemType


class ReviewResponse(BaseModel):
    """Review as shown on an item page."""

    review_id: str
    item_id: str
    item_type: ReviewItemType
    item_title: str
    user_id: str
    author_name: str
    rating: int
    text: str
    created_at: datetime

    @classmethod
    def from_review(cls, review: Review) -> "ReviewResponse":
        return cls(
            review_id=str(review.id),
            item_id=str(review.item_id),
            item_type=review.item_type,
            item_title=review.item_title,
            user_id=str(review.user_id),
            author_name=review.author_name,
            rating=review.rating,
            text=review.text,
            created_at=review.created_at,
        )


class AddReviewRequest(BaseModel):
    """Add review request."""

    item_type: ReviewItemType
    item_id: str
    rating: int = Field(ge=1, le=5)
    text: str
    user_id: str


class AddReviewUseCase(BaseUseCase):
    """Use case for reviewing a business or vehicle."""

    def __init__(self, review_service: ReviewService, user_service: UserService) -> None:
        """Initialize add review use case.

        Args:
            review_service: Review domain service
            user_service: User domain service
        """
        self.review_service = review_service
        self.user_service = user_service

    async def execute(self, request: AddReviewRequest) -> ReviewResponse:
        """Execute add review flow.

        Raises:
            NotFoundError: If user or reviewed item not found
            PermissionDeniedError: If user is suspended
            ValidationError: If text is blank
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        review = await self.review_service.add_review(
            caller,
            request.item_type,
            UUID(request.item_id),
            request.rating,
            request.text,
        )
        return ReviewResponse.from_review(review)
