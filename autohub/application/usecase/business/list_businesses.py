"""List businesses use cases.

Public directory queries need no caller; the moderation queue and the
admin search do.
"""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.business.get_business import (
    BusinessListResponse,
    BusinessResponse,
    with_ratings,
)
from autohub.domain.repository import BusinessSortOrder
from autohub.domain.service import BusinessService, UserService
from autohub.domain.value import UserId


class ListBusinessesRequest(BaseModel):
    """Public directory request."""

    category: str | None = None
    location: str | None = None
    search: str | None = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListBusinessesUseCase(BaseUseCase):
    """Use case for the public directory of approved listings."""

    def __init__(self, business_service: BusinessService) -> None:
        self.business_service = business_service

    async def execute(self, request: ListBusinessesRequest) -> BusinessListResponse:
        with logfire.span(
            "list_businesses.execute",
            category=request.category,
            location=request.location,
            limit=request.limit,
            offset=request.offset,
        ):
            businesses, total = await self.business_service.list_approved(
                category=request.category,
                location=request.location,
                search=request.search,
                limit=request.limit,
                offset=request.offset,
            )
            return BusinessListResponse(
                businesses=await with_ratings(self.business_service, businesses),
                total=total,
                limit=request.limit,
                offset=request.offset,
            )


class ListFeaturedBusinessesRequest(BaseModel):
    count: int = Field(default=6, ge=1, le=50)


class ListFeaturedBusinessesUseCase(BaseUseCase):
    """Use case for the featured strip on the home page."""

    def __init__(self, business_service: BusinessService) -> None:
        self.business_service = business_service

    async def execute(
        self, request: ListFeaturedBusinessesRequest
    ) -> list[BusinessResponse]:
        """Featured listings that are approved."""
        businesses = await self.business_service.list_featured(request.count)
        return await with_ratings(self.business_service, businesses)


class ListOwnedBusinessesRequest(BaseModel):
    """Listings owned by a user, in any status."""

    owner_id: str


class ListOwnedBusinessesUseCase(BaseUseCase):
    def __init__(self, business_service: BusinessService) -> None:
        self.business_service = business_service

    async def execute(
        self, request: ListOwnedBusinessesRequest
    ) -> list[BusinessResponse]:
        businesses = await self.business_service.list_by_owner(
            UserId(UUID(request.owner_id))
        )
        return await with_ratings(self.business_service, businesses)


class ListPendingBusinessesRequest(BaseModel):
    user_id: str


class ListPendingBusinessesUseCase(BaseUseCase):
    """Use case for the moderation queue (new and edited listings)."""

    def __init__(
        self, business_service: BusinessService, user_service: UserService
    ) -> None:
        self.business_service = business_service
        self.user_service = user_service

    async def execute(
        self, request: ListPendingBusinessesRequest
    ) -> list[BusinessResponse]:
        """Execute list pending flow.

        Raises:
            PermissionDeniedError: If user is not a moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        businesses = await self.business_service.list_pending(caller)
        return [BusinessResponse.from_business(b) for b in businesses]


class SearchBusinessesRequest(BaseModel):
    """Admin search across every status."""

    category: str | None = None
    location: str | None = None
    search: str | None = None
    sort: BusinessSortOrder = BusinessSortOrder.NEWEST
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    user_id: str


class SearchBusinessesUseCase(BaseUseCase):
    """Use case for the admin business table."""

    def __init__(
        self, business_service: BusinessService, user_service: UserService
    ) -> None:
        self.business_service = business_service
        self.user_service = user_service

    async def execute(self, request: SearchBusinessesRequest) -> BusinessListResponse:
        """Execute admin search flow.

        Raises:
            PermissionDeniedError: If user is not a moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        businesses, total = await self.business_service.search_businesses(
            caller,
            category=request.category,
            location=request.location,
            search=request.search,
            sort=request.sort,
            limit=request.limit,
            offset=request.offset,
        )
        return BusinessListResponse(
            businesses=await with_ratings(self.business_service, businesses),
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
