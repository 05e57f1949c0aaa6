"""Business listing domain service."""

from typing import Any, Dict, List, Optional, Sequence
from uuid import uuid4

import logfire

from autohub.domain.error import NotFoundError, ValidationError
from autohub.domain.model import Business, BusinessDetails, RatingSummary
from autohub.domain.model.business import EDITABLE_BUSINESS_FIELDS
from autohub.domain.model.common import utcnow
from autohub.domain.policy import (
    can_manage_business,
    can_moderate,
    can_participate,
    is_moderator,
    is_staff,
    require,
)
from autohub.domain.repository import (
    BusinessRepository,
    BusinessSortOrder,
    ReviewRepository,
)
from autohub.domain.value import (
    ActivityType,
    BusinessId,
    BusinessStatus,
    Caller,
    ReviewItemType,
    UserId,
)

from .activity_service import ActivityService
from .base import Service

AWAITING_REVIEW = (BusinessStatus.PENDING, BusinessStatus.EDIT_PENDING)


class BusinessService(Service):
    """Domain service for business listings."""

    def __init__(
        self,
        business_repository: BusinessRepository,
        review_repository: ReviewRepository,
        activity_service: ActivityService,
    ) -> None:
        """Initialize business service.

        Args:
            business_repository: Business repository
            review_repository: Review repository, for rating summaries
            activity_service: Activity log service
        """
        self.business_repository = business_repository
        self.review_repository = review_repository
        self.activity_service = activity_service

    async def get_business_by_id(self, business_id: BusinessId) -> Business:
        """Get business by ID.

        Raises:
            NotFoundError: If business doesn't exist
        """
        business = await self.business_repository.find_by_id(business_id)
        if business is None:
            raise NotFoundError("Business", str(business_id))
        return business

    async def rating_summaries(
        self, businesses: Sequence[Business]
    ) -> Dict[BusinessId, RatingSummary]:
        """Average rating and review count for each business (one query)."""
        if not businesses:
            return {}
        summaries = await self.review_repository.summarize(
            ReviewItemType.BUSINESS, [b.id for b in businesses]
        )
        return {b.id: summaries.get(b.id, RatingSummary()) for b in businesses}

    async def create_business(
        self, caller: Caller, details: BusinessDetails
    ) -> Business:
        """Create a listing owned by the caller.

        Staff listings are published immediately; everyone else's wait for
        moderation.

        Raises:
            PermissionDeniedError: If caller is suspended
        """
        with logfire.span("create_business", user_id=str(caller.user_id)):
            require(can_participate(caller), caller, "create", "business", "new")

            status = BusinessStatus.APPROVED if is_staff(caller) else BusinessStatus.PENDING
            business = Business(
                **details.model_dump(),
                id=BusinessId(uuid4()),
                owner_id=caller.user_id,
                owner_name=caller.name,
                status=status,
            )
            saved = await self.business_repository.save(business)

            await self.activity_service.log(
                f"New business listing submitted: {saved.title}",
                ActivityType.LISTING,
                related_id=str(saved.id),
                user_id=caller.user_id,
            )
            logfire.info("Business created", business_id=str(saved.id), status=status.value)
            return saved

    async def update_business(
        self, caller: Caller, business_id: BusinessId, changes: Dict[str, Any]
    ) -> Business:
        """Apply owner edits to a listing.

        A non-moderator editing an approved listing sends it back to
        moderation: status becomes edit-pending and verified is cleared.

        Raises:
            NotFoundError: If business doesn't exist
            PermissionDeniedError: If caller is neither owner nor moderator
            ValidationError: If changes include fields owners cannot edit
        """
        with logfire.span("update_business", business_id=str(business_id)):
            business = await self.get_business_by_id(business_id)
            require(
                can_manage_business(caller, business),
                caller,
                "edit",
                "business",
                str(business_id),
            )

            unknown = set(changes) - EDITABLE_BUSINESS_FIELDS
            if unknown:
                raise ValidationError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")

            update: Dict[str, Any] = {**changes, "updated_at": utcnow()}
            if not is_moderator(caller) and business.status == BusinessStatus.APPROVED:
                update["status"] = BusinessStatus.EDIT_PENDING
                update["verified"] = False

            updated = Business.model_validate({**business.model_dump(), **update})
            saved = await self.business_repository.save(updated)

            await self.activity_service.log(
                f"Business listing updated: {saved.title}",
                ActivityType.LISTING,
                related_id=str(business_id),
                user_id=caller.user_id,
            )
            return saved

    async def moderate_business(
        self,
        caller: Caller,
        business_id: BusinessId,
        status: Optional[BusinessStatus] = None,
        verified: Optional[bool] = None,
        featured: Optional[bool] = None,
    ) -> Business:
        """Change the moderation fields of a listing.

        Raises:
            NotFoundError: If business doesn't exist
            PermissionDeniedError: If caller is not a moderator
        """
        with logfire.span(
            "moderate_business",
            business_id=str(business_id),
            status=status.value if status else None,
        ):
            require(can_moderate(caller), caller, "moderate", "business", str(business_id))
            business = await self.get_business_by_id(business_id)

            update: Dict[str, Any] = {"updated_at": utcnow()}
            if status is not None:
                update["status"] = status
            if verified is not None:
                update["verified"] = verified
            if featured is not None:
                update["featured"] = featured

            saved = await self.business_repository.save(business.model_copy(update=update))

            await self.activity_service.log(
                f"Business {saved.title} moderated: status={saved.status.value}, "
                f"verified={saved.verified}, featured={saved.featured}",
                ActivityType.BUSINESS,
                related_id=str(business_id),
                user_id=caller.user_id,
            )
            return saved

    async def delete_business(self, caller: Caller, business_id: BusinessId) -> None:
        """Delete a listing.

        Raises:
            NotFoundError: If business doesn't exist
            PermissionDeniedError: If caller is neither owner nor moderator
        """
        with logfire.span("delete_business", business_id=str(business_id)):
            business = await self.get_business_by_id(business_id)
            require(
                can_manage_business(caller, business),
                caller,
                "delete",
                "business",
                str(business_id),
            )
            await self.business_repository.delete(business_id)

            await self.activity_service.log(
                f"Business listing deleted: {business.title}",
                ActivityType.BUSINESS,
                related_id=str(business_id),
                user_id=caller.user_id,
            )

    async def transfer_ownership(
        self, business_id: BusinessId, owner_id: UserId, owner_name: str
    ) -> Business:
        """Hand a listing to a new owner and mark it verified.

        Raises:
            NotFoundError: If business doesn't exist
        """
        business = await self.get_business_by_id(business_id)
        transferred = business.model_copy(
            update={
                "owner_id": owner_id,
                "owner_name": owner_name,
                "verified": True,
                "updated_at": utcnow(),
            }
        )
        return await self.business_repository.save(transferred)

    async def list_approved(
        self,
        category: Optional[str] = None,
        location: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[List[Business], int]:
        """Public directory, newest first."""
        statuses = [BusinessStatus.APPROVED]
        search = search.strip() if search else None
        total = await self.business_repository.count(
            statuses=statuses, category=category, location=location, search=search
        )
        businesses = await self.business_repository.find_all(
            statuses=statuses,
            category=category,
            location=location,
            search=search,
            limit=limit,
            offset=offset,
        )
        return businesses, total

    async def list_featured(self, count: int) -> List[Business]:
        """Featured listings that are publicly visible."""
        return await self.business_repository.find_all(
            statuses=[BusinessStatus.APPROVED], featured=True, limit=count
        )

    async def list_by_owner(self, owner_id: UserId) -> List[Business]:
        """Every listing a user owns, whatever its status."""
        return await self.business_repository.find_all(owner_id=owner_id, limit=1000)

    async def list_pending(self, caller: Caller) -> List[Business]:
        """Moderation queue: new listings and edited ones.

        Raises:
            PermissionDeniedError: If caller is not a moderator
        """
        require(can_moderate(caller), caller, "list", "businesses", "pending")
        return await self.business_repository.find_all(
            statuses=AWAITING_REVIEW, sort=BusinessSortOrder.OLDEST, limit=1000
        )

    async def search_businesses(
        self,
        caller: Caller,
        category: Optional[str] = None,
        location: Optional[str] = None,
        search: Optional[str] = None,
        sort: BusinessSortOrder = BusinessSortOrder.NEWEST,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[List[Business], int]:
        """Admin listing across all statuses.

        Raises:
            PermissionDeniedError: If caller is not a moderator
        """
        with logfire.span(
            "search_businesses", category=category, location=location, search=search
        ):
            require(can_moderate(caller), caller, "search", "businesses", "*")
            search = search.strip() if search else None
            total = await self.business_repository.count(
                category=category, location=location, search=search
            )
            businesses = await self.business_repository.find_all(
                category=category,
                location=location,
                search=search,
                sort=sort,
                limit=limit,
                offset=offset,
            )
            return businesses, total
