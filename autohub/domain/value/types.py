"""Domain value objects for AutoHub.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from autohub.domain.value.common import RootValueObject, ValueObject
from autohub.domain.value.identifiers import UserId


class UserRole(str, Enum):
    """Role of a user account."""

    ADMINISTRATOR = "Administrator"
    MODERATOR = "Moderator"
    AUTHOR = "Author"
    USER = "User"
    BUSINESS_OWNER = "Business Owner"


class UserStatus(str, Enum):
    """Account status. Suspended users cannot change anything."""

    ACTIVE = "Active"
    SUSPENDED = "Suspended"


class VoteDirection(str, Enum):
    """Direction of a vote on a question or answer."""

    UP = "up"
    DOWN = "down"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class ActivityType(str, Enum):
    """Category of an activity log entry."""

    USER = "user"
    BUSINESS = "business"
    LISTING = "listing"
    REVIEW = "review"
    DATA = "data"
    BLOG = "blog"
    QUESTION = "question"
    CATEGORY = "category"
    CLAIM = "claim"


class BusinessStatus(str, Enum):
    """Moderation status of a business listing."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    EDIT_PENDING = "edit-pending"


class ReviewItemType(str, Enum):
    """Kind of item a review is about."""

    BUSINESS = "business"
    VEHICLE = "vehicle"


class DriveType(str, Enum):
    """Driven wheels of a vehicle."""

    FWD = "FWD"
    RWD = "RWD"
    AWD = "AWD/4WD"


class FuelType(str, Enum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    HYBRID = "Hybrid"
    ELECTRIC = "Electric"


class Transmission(str, Enum):
    MANUAL = "Manual"
    AUTOMATIC = "Automatic"
    CVT = "CVT"
    DCT = "DCT"


class ClaimStatus(str, Enum):
    """Status of a business ownership claim."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TagName(RootValueObject[str]):
    """Tag attached to a question.

    Must be lowercase, alphanumeric with hyphens, 2-30 characters.
    Examples: 'engine', 'brakes', 'ev-charging'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not re.match(r"^[a-z0-9-]{2,30}$", v):
            raise ValueError(
                "Tag name must be 2-30 characters, lowercase, alphanumeric with hyphens"
            )
        return v

    @classmethod
    def from_label(cls, label: str) -> "TagName":
        """Build a tag from free text ("EV Charging" -> "ev-charging")."""
        slug = re.sub(r"[^a-z0-9]+", "-", label.strip().lower()).strip("-")
        return cls(slug[:30].rstrip("-"))


class Caller(ValueObject):
    """The user performing an operation.

    Resolved once per request and passed explicitly to every mutation, so
    permission checks never depend on ambient state.
    """

    user_id: UserId
    name: str
    role: UserRole
    status: UserStatus = UserStatus.ACTIVE
