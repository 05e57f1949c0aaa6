"""Review use cases."""

from .add_review import AddReviewRequest, AddReviewUseCase, ReviewResponse
from .delete_review import DeleteReviewRequest, DeleteReviewResponse, DeleteReviewUseCase
from .list_reviews import (
    ListAllReviewsRequest,
    ListAllReviewsResponse,
    ListAllReviewsUseCase,
    ListReviewsRequest,
    ListReviewsResponse,
    ListReviewsUseCase,
)

__all__ = [
    "AddReviewRequest",
    "AddReviewUseCase",
    "DeleteReviewRequest",
    "DeleteReviewResponse",
    "DeleteReviewUseCase",
    "ListAllReviewsRequest",
    "ListAllReviewsResponse",
    "ListAllReviewsUseCase",
    "ListReviewsRequest",
    "ListReviewsResponse",
    "ListReviewsUseCase",
    "ReviewResponse",
]
