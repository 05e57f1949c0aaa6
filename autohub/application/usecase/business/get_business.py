"""Get business use case.

The response models here are shared by every business use case.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase
from autohub.domain.model import Business, ContactInfo, RatingSummary, SocialLinks
from autohub.domain.service import BusinessService
from autohub.domain.value import BusinessId, BusinessStatus


class BusinessResponse(BaseModel):
    """Business listing with its rating summary."""

    business_id: str
    title: str
    owner_id: str
    owner_name: str
    category: str
    description: str
    address: str
    location: str
    contact: ContactInfo
    socials: SocialLinks
    main_image_url: str | None
    gallery_image_urls: list[str]
    services_offered: list[str]
    opening_hours: str | None
    closing_hours: str | None
    verified: bool
    featured: bool
    status: BusinessStatus
    created_at: datetime
    updated_at: datetime
    average_rating: float
    review_count: int

    @classmethod
    def from_business(
        cls, business: Business, summary: Optional[RatingSummary] = None
    ) -> "BusinessResponse":
        summary = summary or RatingSummary()
        return cls(
            business_id=str(business.id),
            title=business.title,
            owner_id=str(business.owner_id),
            owner_name=business.owner_name,
            category=business.category,
            description=business.description,
            address=business.address,
            location=business.location,
            contact=business.contact,
            socials=business.socials,
            main_image_url=business.main_image_url,
            gallery_image_urls=business.gallery_image_urls,
            services_offered=business.services_offered,
            opening_hours=business.opening_hours,
            closing_hours=business.closing_hours,
            verified=business.verified,
            featured=business.featured,
            status=business.status,
            created_at=business.created_at,
            updated_at=business.updated_at,
            average_rating=summary.average_rating,
            review_count=summary.review_count,
        )


class BusinessListResponse(BaseModel):
    """A page of listings."""

    businesses: list[BusinessResponse]
    total: int
    limit: int
    offset: int


async def with_ratings(
    business_service: BusinessService, businesses: list[Business]
) -> list[BusinessResponse]:
    """Attach rating summaries to listings using a single grouped query."""
    summaries = await business_service.rating_summaries(businesses)
    return [BusinessResponse.from_business(b, summaries.get(b.id)) for b in businesses]


class GetBusinessRequest(BaseModel):
    """Get business request."""

    business_id: str


class GetBusinessUseCase(BaseUseCase):
    """Use case for retrieving one listing."""

    def __init__(self, business_service: BusinessService) -> None:
        self.business_service = business_service

    async def execute(self, request: GetBusinessRequest) -> BusinessResponse:
        """Execute get business flow.

        Raises:
            NotFoundError: If business doesn't exist
        """
        business = await self.business_service.get_business_by_id(
            BusinessId(UUID(request.business_id))
        )
        [response] = await with_ratings(self.business_service, [business])
        return response
