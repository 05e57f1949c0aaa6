"""Domain model entities for AutoHub."""

from autohub.domain.model.activity import Activity
from autohub.domain.model.blog import (
    BlogPost,
    BlogPostDetails,
    Comment,
    Reply,
)
from autohub.domain.model.business import (
    Business,
    BusinessDetails,
    ContactInfo,
    SocialLinks,
)
from autohub.domain.model.category import Category
from autohub.domain.model.claim import BusinessClaim
from autohub.domain.model.question import Answer, Question
from autohub.domain.model.review import RatingSummary, Review
from autohub.domain.model.site_settings import (
    SecuritySettings,
    SeoSettings,
    SettingsKind,
)
from autohub.domain.model.user import User
from autohub.domain.model.vehicle import (
    Vehicle,
    VehicleDetails,
    VehicleDimensions,
    VehicleFeatures,
    VehiclePerformance,
)
from autohub.domain.model.vote import Votable

__all__ = [
    "Activity",
    "Answer",
    "BlogPost",
    "BlogPostDetails",
    "Business",
    "BusinessClaim",
    "BusinessDetails",
    "Category",
    "Comment",
    "ContactInfo",
    "Question",
    "RatingSummary",
    "Reply",
    "Review",
    "SecuritySettings",
    "SeoSettings",
    "SettingsKind",
    "SocialLinks",
    "User",
    "Vehicle",
    "VehicleDetails",
    "VehicleDimensions",
    "VehicleFeatures",
    "VehiclePerformance",
    "Votable",
]
