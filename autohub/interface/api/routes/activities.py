"""Activity log routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query
from pydantic import BaseModel

from autohub.application.usecase.activity import (
    ActivityCountResponse,
    ActivityResponse,
    ClearActivitiesRequest,
    ClearActivitiesUseCase,
    ListActivitiesRequest,
    ListActivitiesResponse,
    ListActivitiesUseCase,
    ListUserActivitiesRequest,
    ListUserActivitiesUseCase,
    MarkActivitiesReadRequest,
    MarkActivitiesReadUseCase,
)
from autohub.application.usecase.auth import GetCurrentUserUseCase
from autohub.config import PaginationSettings
from autohub.domain.value import ActivityType
from autohub.interface.api.session import authenticate, page_limit

router = APIRouter(prefix="/activities", tags=["activities"], route_class=DishkaRoute)


class MarkReadAPIRequest(BaseModel):
    activity_ids: list[UUID]


@router.get("", response_model=ListActivitiesResponse)
async def list_activities(
    list_activities_use_case: FromDishka[ListActivitiesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    pagination: FromDishka[PaginationSettings],
    type: ActivityType | None = Query(default=None),
    search: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListActivitiesResponse:
    """Site-wide activity feed for moderators."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await list_activities_use_case.execute(
        ListActivitiesRequest(
            type=type,
            search=search,
            limit=page_limit(limit, pagination),
            offset=offset,
            user_id=user.user_id,
        )
    )


@router.get("/recent", response_model=list[ActivityResponse])
async def list_recent_activities(
    list_user_activities_use_case: FromDishka[ListUserActivitiesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    user_id: UUID | None = Query(default=None),
    count: int = Query(default=10, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
) -> list[ActivityResponse]:
    """Most recent entries, for one user or for everyone.

    Users may read their own entries; anything else needs a moderator.
    """
    user = await authenticate(auth_token, get_current_user_use_case)
    return await list_user_activities_use_case.execute(
        ListUserActivitiesRequest(
            target_user_id=str(user_id) if user_id else None,
            count=count,
            user_id=user.user_id,
        )
    )


@router.post("/read", response_model=ActivityCountResponse)
async def mark_activities_read(
    request: MarkReadAPIRequest,
    mark_read_use_case: FromDishka[MarkActivitiesReadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ActivityCountResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await mark_read_use_case.execute(
        MarkActivitiesReadRequest(
            activity_ids=[str(activity_id) for activity_id in request.activity_ids],
            user_id=user.user_id,
        )
    )


@router.delete("", response_model=ActivityCountResponse)
async def clear_activities(
    clear_activities_use_case: FromDishka[ClearActivitiesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    user_id: UUID | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ActivityCountResponse:
    """Delete the whole log (moderators) or one user's entries."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await clear_activities_use_case.execute(
        ClearActivitiesRequest(
            target_user_id=str(user_id) if user_id else None,
            user_id=user.user_id,
        )
    )
