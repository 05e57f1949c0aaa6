"""List activities use cases."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.domain.model import Activity
from autohub.domain.service import ActivityService, UserService
from autohub.domain.value import ActivityType, UserId


class ActivityResponse(BaseModel):
    """Activity log entry."""

    activity_id: str
    description: str
    type: ActivityType
    timestamp: datetime
    user_id: str | None
    related_id: str | None
    read: bool

    @classmethod
    def from_activity(cls, activity: Activity) -> "ActivityResponse":
        return cls(
            activity_id=str(activity.id),
            description=activity.description,
            type=activity.type,
            timestamp=activity.timestamp,
            user_id=str(activity.user_id) if activity.user_id else None,
            related_id=activity.related_id,
            read=activity.read,
        )


class ListActivitiesRequest(BaseModel):
    """List activities request."""

    type: ActivityType | None = None
    search: str | None = None  # Case-insensitive match on the description
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    user_id: str


class ListActivitiesResponse(BaseModel):
    activities: list[ActivityResponse]
    total: int
    limit: int
    offset: int


class ListActivitiesUseCase(BaseUseCase):
    """Use case for the admin activity table."""

    def __init__(
        self, activity_service: ActivityService, user_service: UserService
    ) -> None:
        """Initialize list activities use case.

        Args:
            activity_service: Activity log service
            user_service: User domain service
        """
        self.activity_service = activity_service
        self.user_service = user_service

    async def execute(self, request: ListActivitiesRequest) -> ListActivitiesResponse:
        """Execute list activities flow.

        Raises:
            PermissionDeniedError: If user is not a moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        activities, total = await self.activity_service.list_activities(
            caller,
            type=request.type,
            search=request.search,
            limit=request.limit,
            offset=request.offset,
        )
        logfire.info("Activities listed", count=len(activities), total=total)
        return ListActivitiesResponse(
            activities=[ActivityResponse.from_activity(a) for a in activities],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )


class ListUserActivitiesRequest(BaseModel):
    """Latest entries, for everyone or for one user."""

    target_user_id: str | None = None  # None means every user (moderators only)
    count: int = Field(default=10, ge=1, le=100)
    user_id: str


class ListUserActivitiesUseCase(BaseUseCase):
    def __init__(
        self, activity_service: ActivityService, user_service: UserService
    ) -> None:
        self.activity_service = activity_service
        self.user_service = user_service

    async def execute(self, request: ListUserActivitiesRequest) -> list[ActivityResponse]:
        """Execute recent activities flow.

        Raises:
            PermissionDeniedError: If user may not read these entries
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        if request.target_user_id is None:
            activities = await self.activity_service.recent_activities(
                caller, request.count
            )
        else:
            activities = await self.activity_service.user_activities(
                caller, UserId(UUID(request.target_user_id)), request.count
            )
        return [ActivityResponse.from_activity(a) for a in activities]
