"""Domain services."""

from .activity_service import ActivityService
from .base import Service
from .blog_service import BlogService, CommentService
from .business_service import BusinessService
from .category_service import CategoryService
from .claim_service import ClaimService
from .dashboard_service import DashboardCounts, DashboardService
from .jwt_service import JWTService
from .question_service import QuestionService
from .review_service import ReviewService
from .site_settings_service import SiteSettingsService
from .user_service import UserService
from .vehicle_service import VehicleService

__all__ = [
    "ActivityService",
    "BlogService",
    "BusinessService",
    "CategoryService",
    "ClaimService",
    "CommentService",
    "DashboardCounts",
    "DashboardService",
    "JWTService",
    "QuestionService",
    "ReviewService",
    "Service",
    "SiteSettingsService",
    "UserService",
    "VehicleService",
]
