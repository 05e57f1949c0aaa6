"""Business listing aggregate."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from autohub.domain.model.common import DomainModel, utcnow
from autohub.domain.value import BusinessId, BusinessStatus, UserId
from autohub.domain.value.common import ValueObject


class ContactInfo(ValueObject):
    """Ways to reach a business."""

    phone: Optional[str] = Field(default=None, max_length=50)
    email: Optional[str] = Field(default=None, max_length=255)
    website: Optional[str] = Field(default=None, max_length=500)


class SocialLinks(ValueObject):
    """Social media profiles of a business."""

    twitter: Optional[str] = Field(default=None, max_length=500)
    facebook: Optional[str] = Field(default=None, max_length=500)
    instagram: Optional[str] = Field(default=None, max_length=500)


class BusinessDetails(ValueObject):
    """Owner-editable fields of a listing."""

    title: str = Field(min_length=1, max_length=200)
    category: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=5000)
    address: str = Field(default="", max_length=500)
    location: str = Field(default="", max_length=100)
    contact: ContactInfo = ContactInfo()
    socials: SocialLinks = SocialLinks()
    main_image_url: Optional[str] = None
    gallery_image_urls: list[str] = Field(default_factory=list)
    services_offered: list[str] = Field(default_factory=list)
    opening_hours: Optional[str] = None
    closing_hours: Optional[str] = None


# Fields an owner may change through update_business
EDITABLE_BUSINESS_FIELDS = frozenset(BusinessDetails.model_fields)


class Business(DomainModel):
    """Business listing.

    Business rules:
    - Only approved listings are shown publicly
    - An owner editing an approved listing sends it back to moderation
      (status edit-pending, verified cleared)
    - Ownership moves to a claimant when a claim is approved
    """

    id: BusinessId
    title: str = Field(min_length=1, max_length=200)
    owner_id: UserId
    owner_name: str = Field(min_length=1, max_length=100)
    category: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=5000)
    address: str = Field(default="", max_length=500)
    location: str = Field(default="", max_length=100)  # Country
    contact: ContactInfo = ContactInfo()
    socials: SocialLinks = SocialLinks()
    main_image_url: Optional[str] = None
    gallery_image_urls: list[str] = Field(default_factory=list)
    services_offered: list[str] = Field(default_factory=list)
    opening_hours: Optional[str] = None
    closing_hours: Optional[str] = None
    verified: bool = False
    featured: bool = False
    status: BusinessStatus = BusinessStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_public(self) -> bool:
        return self.status == BusinessStatus.APPROVED
