"""Delete review use case."""

from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.domain.service import ReviewService, UserService
from autohub.domain.value import ReviewId


class DeleteReviewRequest(BaseModel):
    review_id: str
    user_id: str


class DeleteReviewResponse(BaseModel):
    success: bool
    message: str


class DeleteReviewUseCase(BaseUseCase):
    """Use case for deleting a review."""

    def __init__(self, review_service: ReviewService, user_service: UserService) -> None:
        self.review_service = review_service
        self.user_service = user_service

    async def execute(self, request: DeleteReviewRequest) -> DeleteReviewResponse:
        """Execute delete review flow.

        Raises:
            NotFoundError: If review or user not found
            PermissionDeniedError: If user is neither author nor moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        await self.review_service.delete_review(caller, ReviewId(UUID(request.review_id)))
        return DeleteReviewResponse(success=True, message="Review deleted")
