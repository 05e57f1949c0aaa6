"""In-memory review repository for testing."""

from typing import Dict, List, Optional, Sequence
from uuid import UUID

from autohub.domain.model import RatingSummary, Review
from autohub.domain.repository import ReviewRepository
from autohub.domain.value import ReviewId, ReviewItemType


class InMemoryReviewRepository(ReviewRepository):
    """In-memory implementation of ReviewRepository for testing."""

    def __init__(self) -> None:
        self._reviews: dict[ReviewId, Review] = {}

    async def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        return self._reviews.get(review_id)

    async def find_by_item(
        self, item_type: ReviewItemType, item_id: UUID
    ) -> List[Review]:
        reviews = [
            r
            for r in self._reviews.values()
            if r.item_type == item_type and r.item_id == item_id
        ]
        reviews.sort(key=lambda r: r.created_at, reverse=True)
        return reviews

    async def find_all(self, limit: int = 20, offset: int = 0) -> List[Review]:
        reviews = sorted(self._reviews.values(), key=lambda r: r.created_at, reverse=True)
        return reviews[offset : offset + limit]

    async def count(self) -> int:
        return len(self._reviews)

    async def summarize(
        self, item_type: ReviewItemType, item_ids: Sequence[UUID]
    ) -> Dict[UUID, RatingSummary]:
        """Average rating and review count per item."""
        summaries: Dict[UUID, RatingSummary] = {}
        for item_id in item_ids:
            ratings = [
                r.rating
                for r in self._reviews.values()
                if r.item_type == item_type and r.item_id == item_id
            ]
            if ratings:
                summaries[item_id] = RatingSummary(
                    average_rating=round(sum(ratings) / len(ratings), 2),
                    review_count=len(ratings),
                )
            else:
                summaries[item_id] = RatingSummary()
        return summaries

    async def save(self, review: Review) -> Review:
        self._reviews[review.id] = review
        return review

    async def delete(self, review_id: ReviewId) -> bool:
        return self._reviews.pop(review_id, None) is not None
