"""Repository interfaces for AutoHub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from autohub.domain.repository.activity import ActivityRepository
from autohub.domain.repository.blog import BlogPostRepository, CommentRepository
from autohub.domain.repository.business import BusinessRepository, BusinessSortOrder
from autohub.domain.repository.category import CategoryRepository
from autohub.domain.repository.claim import ClaimRepository
from autohub.domain.repository.question import QuestionRepository, QuestionSortOrder
from autohub.domain.repository.review import ReviewRepository
from autohub.domain.repository.site_settings import SiteSettingsRepository
from autohub.domain.repository.user import UserRepository
from autohub.domain.repository.vehicle import VehicleRepository, VehicleSortOrder

__all__ = [
    "ActivityRepository",
    "BlogPostRepository",
    "BusinessRepository",
    "BusinessSortOrder",
    "CategoryRepository",
    "ClaimRepository",
    "CommentRepository",
    "QuestionRepository",
    "QuestionSortOrder",
    "ReviewRepository",
    "SiteSettingsRepository",
    "UserRepository",
    "VehicleRepository",
    "VehicleSortOrder",
]
