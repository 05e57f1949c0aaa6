"""Review entity and rating aggregates."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from autohub.domain.model.common import DomainModel, utcnow
from autohub.domain.value import ReviewId, ReviewItemType, UserId


class Review(DomainModel):
    """A rated review of a business or vehicle."""

    id: ReviewId
    item_id: UUID  # BusinessId or VehicleId, depending on item_type
    item_type: ReviewItemType
    item_title: str = Field(default="", max_length=200)
    user_id: UserId
    author_name: str = Field(min_length=1, max_length=100)
    rating: int = Field(ge=1, le=5)
    text: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=utcnow)


class RatingSummary(DomainModel):
    """Average rating and review count for one item."""

    average_rating: float = 0.0
    review_count: int = 0
