"""In-memory repository implementations for testing."""

from .activity import InMemoryActivityRepository
from .blog import InMemoryBlogPostRepository, InMemoryCommentRepository
from .business import InMemoryBusinessRepository
from .category import InMemoryCategoryRepository
from .claim import InMemoryClaimRepository
from .question import InMemoryQuestionRepository
from .review import InMemoryReviewRepository
from .site_settings import InMemorySiteSettingsRepository
from .user import InMemoryUserRepository
from .vehicle import InMemoryVehicleRepository

__all__ = [
    "InMemoryActivityRepository",
    "InMemoryBlogPostRepository",
    "InMemoryBusinessRepository",
    "InMemoryCategoryRepository",
    "InMemoryClaimRepository",
    "InMemoryCommentRepository",
    "InMemoryQuestionRepository",
    "InMemoryReviewRepository",
    "InMemorySiteSettingsRepository",
    "InMemoryUserRepository",
    "InMemoryVehicleRepository",
]
