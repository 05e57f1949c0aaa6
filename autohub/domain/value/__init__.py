"""Domain value objects for AutoHub."""

from autohub.domain.value.identifiers import (
    ActivityId,
    AnswerId,
    BlogPostId,
    BusinessId,
    CategoryId,
    ClaimId,
    CommentId,
    QuestionId,
    ReplyId,
    ReviewId,
    UserId,
    VehicleId,
)
from autohub.domain.value.types import (
    ActivityType,
    BusinessStatus,
    Caller,
    ClaimStatus,
    DriveType,
    FuelType,
    ReviewItemType,
    TagName,
    Transmission,
    UserRole,
    UserStatus,
    VotableType,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "ActivityId",
    "BusinessId",
    "ReviewId",
    "ClaimId",
    "VehicleId",
    "BlogPostId",
    "CommentId",
    "ReplyId",
    "CategoryId",
    # Types
    "ActivityType",
    "BusinessStatus",
    "Caller",
    "ClaimStatus",
    "DriveType",
    "FuelType",
    "ReviewItemType",
    "TagName",
    "Transmission",
    "UserRole",
    "UserStatus",
    "VotableType",
    "VoteDirection",
]
