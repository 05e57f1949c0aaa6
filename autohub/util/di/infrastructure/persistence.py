"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from autohub.config import Settings
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
from autohub.persistence.database import create_engine, create_session_factory
from autohub.persistence.repository import (
    PostgresActivityRepository,
    PostgresBlogPostRepository,
    PostgresBusinessRepository,
    PostgresCategoryRepository,
    PostgresClaimRepository,
    PostgresCommentRepository,
    PostgresQuestionRepository,
    PostgresReviewRepository,
    PostgresSiteSettingsRepository,
    PostgresUserRepository,
    PostgresVehicleRepository,
)
from autohub.util.di.base import ProviderBase
from autohub.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        One request is one transaction: committed when the request finishes
        without an exception, rolled back otherwise. Claim approval relies
        on this to move ownership and flip the claim atomically.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        """Provide Question repository."""
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_activity_repository(self, session: AsyncSession) -> ActivityRepository:
        """Provide Activity repository."""
        return PostgresActivityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_business_repository(self, session: AsyncSession) -> BusinessRepository:
        """Provide Business repository."""
        return PostgresBusinessRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_review_repository(self, session: AsyncSession) -> ReviewRepository:
        """Provide Review repository."""
        return PostgresReviewRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_claim_repository(self, session: AsyncSession) -> ClaimRepository:
        """Provide Claim repository."""
        return PostgresClaimRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_site_settings_repository(
        self, session: AsyncSession
    ) -> SiteSettingsRepository:
        """Provide SiteSettings repository."""
        return PostgresSiteSettingsRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vehicle_repository(self, session: AsyncSession) -> VehicleRepository:
        """Provide Vehicle repository."""
        return PostgresVehicleRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_blog_post_repository(self, session: AsyncSession) -> BlogPostRepository:
        """Provide BlogPost repository."""
        return PostgresBlogPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_category_repository(self, session: AsyncSession) -> CategoryRepository:
        """Provide Category repository."""
        return PostgresCategoryRepository(session)
