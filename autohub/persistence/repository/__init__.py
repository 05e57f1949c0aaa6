"""PostgreSQL repository implementations."""

from autohub.persistence.repository.activity import PostgresActivityRepository
from autohub.persistence.repository.blog import (
    PostgresBlogPostRepository,
    PostgresCommentRepository,
)
from autohub.persistence.repository.business import PostgresBusinessRepository
from autohub.persistence.repository.category import PostgresCategoryRepository
from autohub.persistence.repository.claim import PostgresClaimRepository
from autohub.persistence.repository.question import PostgresQuestionRepository
from autohub.persistence.repository.review import PostgresReviewRepository
from autohub.persistence.repository.site_settings import PostgresSiteSettingsRepository
from autohub.persistence.repository.user import PostgresUserRepository
from autohub.persistence.repository.vehicle import PostgresVehicleRepository

__all__ = [
    "PostgresActivityRepository",
    "PostgresBlogPostRepository",
    "PostgresBusinessRepository",
    "PostgresCategoryRepository",
    "PostgresClaimRepository",
    "PostgresCommentRepository",
    "PostgresQuestionRepository",
    "PostgresReviewRepository",
    "PostgresSiteSettingsRepository",
    "PostgresUserRepository",
    "PostgresVehicleRepository",
]
