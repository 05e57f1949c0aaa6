"""Admin dashboard counters."""

import logfire

from autohub.domain.model.common import DomainModel
from autohub.domain.policy import can_moderate, require
from autohub.domain.repository import (
    BlogPostRepository,
    BusinessRepository,
    QuestionRepository,
    ReviewRepository,
    UserRepository,
    VehicleRepository,
)
from autohub.domain.value import Caller

from .base import Service
from .business_service import AWAITING_REVIEW


class DashboardCounts(DomainModel):
    users: int
    verified_businesses: int
    pending_listings: int  # New and edited listings awaiting moderation
    reviews: int
    questions: int
    vehicles: int
    blog_posts: int


class DashboardService(Service):
    """Aggregate counts shown on the admin dashboard."""

    def __init__(
        self,
        user_repository: UserRepository,
        business_repository: BusinessRepository,
        review_repository: ReviewRepository,
        question_repository: QuestionRepository,
        vehicle_repository: VehicleRepository,
        blog_post_repository: BlogPostRepository,
    ) -> None:
        self.user_repository = user_repository
        self.business_repository = business_repository
        self.review_repository = review_repository
        self.question_repository = question_repository
        self.vehicle_repository = vehicle_repository
        self.blog_post_repository = blog_post_repository

    async def dashboard_counts(self, caller: Caller) -> DashboardCounts:
        """Raises PermissionDeniedError unless caller is a moderator."""
        with logfire.span("dashboard_counts"):
            require(can_moderate(caller), caller, "view", "dashboard", "*")
            return DashboardCounts(
                users=await self.user_repository.count(),
                verified_businesses=await self.business_repository.count(verified=True),
                pending_listings=await self.business_repository.count(
                    statuses=AWAITING_REVIEW
                ),
                reviews=await self.review_repository.count(),
                questions=await self.question_repository.count(),
                vehicles=await self.vehicle_repository.count(),
                blog_posts=await self.blog_post_repository.count(),
            )
