"""Mock persistence providers for testing."""

from dishka import Scope, provide

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
from autohub.persistence.repository.inmemory import (
    InMemoryActivityRepository,
    InMemoryBlogPostRepository,
    InMemoryBusinessRepository,
    InMemoryCategoryRepository,
    InMemoryClaimRepository,
    InMemoryCommentRepository,
    InMemoryQuestionRepository,
    InMemoryReviewRepository,
    InMemorySiteSettingsRepository,
    InMemoryUserRepository,
    InMemoryVehicleRepository,
)
from autohub.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP scoped so that state survives across the requests
    of one container; every test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_question_repository(self) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository()

    @provide(scope=Scope.APP)
    def get_activity_repository(self) -> ActivityRepository:
        return InMemoryActivityRepository()

    @provide(scope=Scope.APP)
    def get_business_repository(self) -> BusinessRepository:
        return InMemoryBusinessRepository()

    @provide(scope=Scope.APP)
    def get_review_repository(self) -> ReviewRepository:
        return InMemoryReviewRepository()

    @provide(scope=Scope.APP)
    def get_claim_repository(self) -> ClaimRepository:
        return InMemoryClaimRepository()

    @provide(scope=Scope.APP)
    def get_site_settings_repository(self) -> SiteSettingsRepository:
        return InMemorySiteSettingsRepository()

    @provide(scope=Scope.APP)
    def get_vehicle_repository(self) -> VehicleRepository:
        return InMemoryVehicleRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_blog_post_repository(
        self, comments: CommentRepository
    ) -> BlogPostRepository:
        """Provide in-memory blog repository that cascades to comments."""
        return InMemoryBlogPostRepository(comments)

    @provide(scope=Scope.APP)
    def get_category_repository(self) -> CategoryRepository:
        return InMemoryCategoryRepository()
