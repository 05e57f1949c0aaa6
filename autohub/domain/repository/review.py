"""Review repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from autohub.domain.model import RatingSummary, Review
from autohub.domain.value import ReviewId, ReviewItemType


class ReviewRepository(ABC):
    """Repository for Review entity."""

    @abstractmethod
    async def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        """Find a review by ID."""
        pass

    @abstractmethod
    async def find_by_item(
        self, item_type: ReviewItemType, item_id: UUID
    ) -> List[Review]:
        """All reviews of one item, newest first."""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 20, offset: int = 0) -> List[Review]:
        """All reviews, newest first."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all reviews."""
        pass

    @abstractmethod
    async def summarize(
        self, item_type: ReviewItemType, item_ids: Sequence[UUID]
    ) -> Dict[UUID, RatingSummary]:
        """Average rating and review count per item (batch query).

        Args:
            item_type: Kind of the items
            item_ids: Items to summarize

        Returns:
            Mapping for every requested id; items without reviews map to
            an empty summary
        """
        pass

    @abstractmethod
    async def save(self, review: Review) -> Review:
        """Save a review."""
        pass

    @abstractmethod
    async def delete(self, review_id: ReviewId) -> bool:
        """Delete a review.

        Returns:
            True if a review was deleted, False if none existed
        """
        pass
