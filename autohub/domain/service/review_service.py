"""Review domain service."""

from typing import List
from uuid import UUID, uuid4

import logfire

from autohub.domain.error import NotFoundError, ValidationError
from autohub.domain.model import Review
from autohub.domain.policy import can_delete_review, can_moderate, can_participate, require
from autohub.domain.repository import (
    BusinessRepository,
    ReviewRepository,
    VehicleRepository,
)
from autohub.domain.value import (
    ActivityType,
    BusinessId,
    Caller,
    ReviewId,
    ReviewItemType,
    VehicleId,
)

from .activity_service import ActivityService
from .base import Service


class ReviewService(Service):
    """Domain service for reviews."""

    def __init__(
        self,
        review_repository: ReviewRepository,
        business_repository: BusinessRepository,
        vehicle_repository: VehicleRepository,
        activity_service: ActivityService,
    ) -> None:
        """Initialize review service.

        Args:
            review_repository: Review repository
            business_repository: Business repository, to check reviewed listings
            vehicle_repository: Vehicle repository, to check reviewed vehicles
            activity_service: Activity log service
        """
        self.review_repository = review_repository
        self.business_repository = business_repository
        self.vehicle_repository = vehicle_repository
        self.activity_service = activity_service

    async def add_review(
        self,
        caller: Caller,
        item_type: ReviewItemType,
        item_id: UUID,
        rating: int,
        text: str,
    ) -> Review:
        """Post a review.

        The reviewed business or vehicle must exist; its title (a
        vehicle's name) is copied onto the review.

        Raises:
            PermissionDeniedError: If caller is suspended
            NotFoundError: If the reviewed business or vehicle doesn't exist
            ValidationError: If text is blank
        """
        with logfire.span(
            "add_review", item_type=item_type.value, item_id=str(item_id), rating=rating
        ):
            require(can_participate(caller), caller, "review", item_type.value, str(item_id))
            text = text.strip()
            if not text:
                raise ValidationError("Review text cannot be empty")

            item_title = await self._item_title(item_type, item_id)

            review = Review(
                id=ReviewId(uuid4()),
                item_id=item_id,
                item_type=item_type,
                item_title=item_title,
                user_id=caller.user_id,
                author_name=caller.name,
                rating=rating,
                text=text,
            )
            saved = await self.review_repository.save(review)

            await self.activity_service.log(
                f"New {rating}-star review for {item_title}",
                ActivityType.REVIEW,
                related_id=str(item_id),
                user_id=caller.user_id,
            )
            return saved

    async def list_for_item(self, item_type: ReviewItemType, item_id: UUID) -> List[Review]:
        return await self.review_repository.find_by_item(item_type, item_id)

    async def list_all(
        self, caller: Caller, limit: int = 20, offset: int = 0
    ) -> tuple[List[Review], int]:
        """Every review, for moderators.

        Raises:
            PermissionDeniedError: If caller is not a moderator
        """
        require(can_moderate(caller), caller, "list", "reviews", "*")
        total = await self.review_repository.count()
        reviews = await self.review_repository.find_all(limit=limit, offset=offset)
        return reviews, total

    async def delete_review(self, caller: Caller, review_id: ReviewId) -> None:
        """Delete a review.

        Raises:
            NotFoundError: If review doesn't exist
            PermissionDeniedError: If caller is neither author nor moderator
        """
        with logfire.span("delete_review", review_id=str(review_id)):
            review = await self.review_repository.find_by_id(review_id)
            if review is None:
                raise NotFoundError("Review", str(review_id))
            require(
                can_delete_review(caller, review), caller, "delete", "review", str(review_id)
            )
            await self.review_repository.delete(review_id)

            await self.activity_service.log(
                f"Review deleted for {review.item_title or review.item_type.value}",
                ActivityType.REVIEW,
                related_id=str(review.item_id),
                user_id=caller.user_id,
            )

    async def _item_title(self, item_type: ReviewItemType, item_id: UUID) -> str:
        if item_type == ReviewItemType.BUSINESS:
            business = await self.business_repository.find_by_id(BusinessId(item_id))
            if business is None:
                raise NotFoundError("Business", str(item_id))
            return business.title

        vehicle = await self.vehicle_repository.find_by_id(VehicleId(item_id))
        if vehicle is None:
            raise NotFoundError("Vehicle", str(item_id))
        return vehicle.name
