"""Domain layer DI providers."""

from dishka import Scope, provide

from autohub.config import AuthSettings, Settings
from autohub.domain.repository import (
    ActivityRepository,
    BlogPostRepository,
    BusinessRepository,
    CategoryRepository,
    ClaimRepository,
    CommentRepository,
    QuestionRepository,
    ReviewRepository,
    SiteSettingsRepository,
    UserRepository,
    VehicleRepository,
)
from autohub.domain.service import (
    ActivityService,
    BlogService,
    BusinessService,
    CategoryService,
    ClaimService,
    CommentService,
    DashboardService,
    JWTService,
    QuestionService,
    ReviewService,
    SiteSettingsService,
    UserService,
    VehicleService,
)
from autohub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_activity_service(
        self, activity_repository: ActivityRepository
    ) -> ActivityService:
        """Provide activity log service."""
        return ActivityService(activity_repository=activity_repository)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        activity_service: ActivityService,
        question_service: QuestionService,
        auth_settings: AuthSettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            activity_service=activity_service,
            question_service=question_service,
            seed_admin_emails=auth_settings.seed_admin_emails,
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        activity_service: ActivityService,
        settings: Settings,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            activity_service=activity_service,
            max_attempts=settings.transactions.max_attempts,
        )

    @provide
    def get_business_service(
        self,
        business_repository: BusinessRepository,
        review_repository: ReviewRepository,
        activity_service: ActivityService,
    ) -> BusinessService:
        """Provide business domain service."""
        return BusinessService(
            business_repository=business_repository,
            review_repository=review_repository,
            activity_service=activity_service,
        )

    @provide
    def get_review_service(
        self,
        review_repository: ReviewRepository,
        business_repository: BusinessRepository,
        vehicle_repository: VehicleRepository,
        activity_service: ActivityService,
    ) -> ReviewService:
        """Provide review domain service."""
        return ReviewService(
            review_repository=review_repository,
            business_repository=business_repository,
            vehicle_repository=vehicle_repository,
            activity_service=activity_service,
        )

    @provide
    def get_claim_service(
        self,
        claim_repository: ClaimRepository,
        business_service: BusinessService,
        user_service: UserService,
        activity_service: ActivityService,
    ) -> ClaimService:
        """Provide claim domain service."""
        return ClaimService(
            claim_repository=claim_repository,
            business_service=business_service,
            user_service=user_service,
            activity_service=activity_service,
        )

    @provide
    def get_site_settings_service(
        self,
        site_settings_repository: SiteSettingsRepository,
        activity_service: ActivityService,
    ) -> SiteSettingsService:
        """Provide site settings service."""
        return SiteSettingsService(
            site_settings_repository=site_settings_repository,
            activity_service=activity_service,
        )

    @provide
    def get_dashboard_service(
        self,
        user_repository: UserRepository,
        business_repository: BusinessRepository,
        review_repository: ReviewRepository,
        question_repository: QuestionRepository,
        vehicle_repository: VehicleRepository,
        blog_post_repository: BlogPostRepository,
    ) -> DashboardService:
        """Provide dashboard service."""
        return DashboardService(
            user_repository=user_repository,
            business_repository=business_repository,
            review_repository=review_repository,
            question_repository=question_repository,
            vehicle_repository=vehicle_repository,
            blog_post_repository=blog_post_repository,
        )

    @provide
    def get_vehicle_service(
        self,
        vehicle_repository: VehicleRepository,
        review_repository: ReviewRepository,
        activity_service: ActivityService,
    ) -> VehicleService:
        """Provide vehicle catalogue service."""
        return VehicleService(
            vehicle_repository=vehicle_repository,
            review_repository=review_repository,
            activity_service=activity_service,
        )

    @provide
    def get_blog_service(
        self,
        blog_post_repository: BlogPostRepository,
        activity_service: ActivityService,
    ) -> BlogService:
        """Provide blog post service."""
        return BlogService(
            blog_post_repository=blog_post_repository,
            activity_service=activity_service,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        blog_post_repository: BlogPostRepository,
        activity_service: ActivityService,
    ) -> CommentService:
        """Provide blog comment service."""
        return CommentService(
            comment_repository=comment_repository,
            blog_post_repository=blog_post_repository,
            activity_service=activity_service,
        )

    @provide
    def get_category_service(
        self,
        category_repository: CategoryRepository,
        activity_service: ActivityService,
    ) -> CategoryService:
        """Provide category service."""
        return CategoryService(
            category_repository=category_repository,
            activity_service=activity_service,
        )
