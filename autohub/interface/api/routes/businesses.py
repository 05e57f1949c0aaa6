"""Business listing routes."""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from autohub.application.usecase.auth import GetCurrentUserUseCase
from autohub.application.usecase.business import (
    BusinessListResponse,
    BusinessResponse,
    CreateBusinessRequest,
    CreateBusinessUseCase,
    DeleteBusinessRequest,
    DeleteBusinessResponse,
    DeleteBusinessUseCase,
    GetBusinessRequest,
    GetBusinessUseCase,
    ListBusinessesRequest,
    ListBusinessesUseCase,
    ListFeaturedBusinessesRequest,
    ListFeaturedBusinessesUseCase,
    ListOwnedBusinessesRequest,
    ListOwnedBusinessesUseCase,
    ListPendingBusinessesRequest,
    ListPendingBusinessesUseCase,
    ModerateBusinessRequest,
    ModerateBusinessUseCase,
    SearchBusinessesRequest,
    SearchBusinessesUseCase,
    UpdateBusinessRequest,
    UpdateBusinessUseCase,
)
from autohub.config import PaginationSettings
from autohub.domain.model import BusinessDetails
from autohub.domain.repository import BusinessSortOrder
from autohub.domain.value import BusinessStatus
from autohub.interface.api.session import authenticate, page_limit

router = APIRouter(prefix="/businesses", tags=["businesses"], route_class=DishkaRoute)


class ModerateBusinessAPIRequest(BaseModel):
    """Moderator decision; fields left out are not changed."""

    status: BusinessStatus | None = None
    verified: bool | None = None
    featured: bool | None = None


@router.get("", response_model=BusinessListResponse)
async def list_businesses(
    list_businesses_use_case: FromDishka[ListBusinessesUseCase],
    pagination: FromDishka[PaginationSettings],
    category: str | None = Query(default=None),
    location: str | None = Query(default=None),
    search: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> BusinessListResponse:
    """Public directory. Only approved listings are returned."""
    return await list_businesses_use_case.execute(
        ListBusinessesRequest(
            category=category,
            location=location,
            search=search,
            limit=page_limit(limit, pagination),
            offset=offset,
        )
    )


@router.get("/featured", response_model=list[BusinessResponse])
async def list_featured_businesses(
    list_featured_use_case: FromDishka[ListFeaturedBusinessesUseCase],
    count: int = Query(default=6, ge=1, le=50),
) -> list[BusinessResponse]:
    return await list_featured_use_case.execute(
        ListFeaturedBusinessesRequest(count=count)
    )


@router.get("/mine", response_model=list[BusinessResponse])
async def list_my_businesses(
    list_owned_use_case: FromDishka[ListOwnedBusinessesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> list[BusinessResponse]:
    """Listings owned by the signed-in user, in any status."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await list_owned_use_case.execute(
        ListOwnedBusinessesRequest(owner_id=user.user_id)
    )


@router.get("/pending", response_model=list[BusinessResponse])
async def list_pending_businesses(
    list_pending_use_case: FromDishka[ListPendingBusinessesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> list[BusinessResponse]:
    """Moderation queue. Moderators only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await list_pending_use_case.execute(
        ListPendingBusinessesRequest(user_id=user.user_id)
    )


@router.get("/admin", response_model=BusinessListResponse)
async def search_businesses(
    search_businesses_use_case: FromDishka[SearchBusinessesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    pagination: FromDishka[PaginationSettings],
    category: str | None = Query(default=None),
    location: str | None = Query(default=None),
    search: str | None = Query(default=None),
    sort: BusinessSortOrder = Query(default=BusinessSortOrder.NEWEST),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> BusinessListResponse:
    """Search every listing regardless of status. Moderators only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await search_businesses_use_case.execute(
        SearchBusinessesRequest(
            category=category,
            location=location,
            search=search,
            sort=sort,
            limit=page_limit(limit, pagination),
            offset=offset,
            user_id=user.user_id,
        )
    )


@router.post("", response_model=BusinessResponse, status_code=status.HTTP_201_CREATED)
async def create_business(
    request: BusinessDetails,
    create_business_use_case: FromDishka[CreateBusinessUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> BusinessResponse:
    """Submit a listing. It stays pending until a moderator approves it."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await create_business_use_case.execute(
        CreateBusinessRequest(details=request, user_id=user.user_id)
    )


@router.get("/{business_id}", response_model=BusinessResponse)
async def get_business(
    business_id: UUID,
    get_business_use_case: FromDishka[GetBusinessUseCase],
) -> BusinessResponse:
    return await get_business_use_case.execute(
        GetBusinessRequest(business_id=str(business_id))
    )


@router.patch("/{business_id}", response_model=BusinessResponse)
async def update_business(
    business_id: UUID,
    request: dict[str, Any],
    update_business_use_case: FromDishka[UpdateBusinessUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> BusinessResponse:
    """Edit listing details.

    Owner edits of an approved listing send it back for moderation.
    """
    user = await authenticate(auth_token, get_current_user_use_case)
    return await update_business_use_case.execute(
        UpdateBusinessRequest(
            business_id=str(business_id), changes=request, user_id=user.user_id
        )
    )


@router.post("/{business_id}/moderate", response_model=BusinessResponse)
async def moderate_business(
    business_id: UUID,
    request: ModerateBusinessAPIRequest,
    moderate_business_use_case: FromDishka[ModerateBusinessUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> BusinessResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await moderate_business_use_case.execute(
        ModerateBusinessRequest(
            business_id=str(business_id),
            status=request.status,
            verified=request.verified,
            featured=request.featured,
            user_id=user.user_id,
        )
    )


@router.delete("/{business_id}", response_model=DeleteBusinessResponse)
async def delete_business(
    business_id: UUID,
    delete_business_use_case: FromDishka[DeleteBusinessUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteBusinessResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await delete_business_use_case.execute(
        DeleteBusinessRequest(business_id=str(business_id), user_id=user.user_id)
    )
