"""PostgreSQL implementation of Review repository."""

from typing import Dict, List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from autohub.domain.model import RatingSummary, Review
from autohub.domain.repository import ReviewRepository
from autohub.domain.value import ReviewId, ReviewItemType
from autohub.persistence.mappers import review_to_dict, row_to_review
from autohub.persistence.tables import reviews_table


class PostgresReviewRepository(ReviewRepository):
    """PostgreSQL implementation of ReviewRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        """Find a review by ID."""
        result = await self.session.execute(
            select(reviews_table).where(reviews_table.c.id == review_id)
        )
        row = result.mappings().first()
        return row_to_review(row) if row else None

    async def find_by_item(
        self, item_type: ReviewItemType, item_id: UUID
    ) -> List[Review]:
        """All reviews of one item, newest first."""
        result = await self.session.execute(
            select(reviews_table)
            .where(
                reviews_table.c.item_type == item_type.value,
                reviews_table.c.item_id == item_id,
            )
            .order_by(desc(reviews_table.c.created_at))
        )
        return [row_to_review(row) for row in result.mappings().all()]

    async def find_all(self, limit: int = 20, offset: int = 0) -> List[Review]:
        """All reviews, newest first."""
        result = await self.session.execute(
            select(reviews_table)
            .order_by(desc(reviews_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        return [row_to_review(row) for row in result.mappings().all()]

    async def count(self) -> int:
        """Count all reviews."""
        result = await self.session.execute(
            select(func.count()).select_from(reviews_table)
        )
        return result.scalar() or 0

    async def summarize(
        self, item_type: ReviewItemType, item_ids: Sequence[UUID]
    ) -> Dict[UUID, RatingSummary]:
        """Average rating and review count per item, in one grouped query."""
        if not item_ids:
            return {}

        with logfire.span(
            "review_repository.summarize", item_type=item_type.value, items=len(item_ids)
        ):
            result = await self.session.execute(
                select(
                    reviews_table.c.item_id,
                    func.avg(reviews_table.c.rating).label("average_rating"),
                    func.count().label("review_count"),
                )
                .where(
                    reviews_table.c.item_type == item_type.value,
                    reviews_table.c.item_id.in_(list(item_ids)),
                )
                .group_by(reviews_table.c.item_id)
            )
            found = {
                row.item_id: RatingSummary(
                    average_rating=round(float(row.average_rating), 2),
                    review_count=row.review_count,
                )
                for row in result.all()
            }
            return {item_id: found.get(item_id, RatingSummary()) for item_id in item_ids}

    async def save(self, review: Review) -> Review:
        """Save a review."""
        await self.session.execute(insert(reviews_table).values(**review_to_dict(review)))
        return review

    async def delete(self, review_id: ReviewId) -> bool:
        """Delete a review."""
        result = await self.session.execute(
            delete(reviews_table)
            .where(reviews_table.c.id == review_id)
            .returning(reviews_table.c.id)
        )
        return result.first() is not None
