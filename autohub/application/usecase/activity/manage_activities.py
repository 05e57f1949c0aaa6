"""Activity log maintenance use cases."""

from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.domain.service import ActivityService, UserService
from autohub.domain.value import ActivityId, UserId


class ActivityCountResponse(BaseModel):
    """Number of entries affected."""

    count: int


class MarkActivitiesReadRequest(BaseModel):
    activity_ids: list[str]
    user_id: str


class MarkActivitiesReadUseCase(BaseUseCase):
    """Use case for flagging entries as read."""

    def __init__(
        self, activity_service: ActivityService, user_service: UserService
    ) -> None:
        self.activity_service = activity_service
        self.user_service = user_service

    async def execute(self, request: MarkActivitiesReadRequest) -> ActivityCountResponse:
        """Ids that no longer exist are skipped.

        Raises:
            PermissionDeniedError: If user is not a moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        updated = await self.activity_service.mark_read(
            caller, [ActivityId(UUID(i)) for i in request.activity_ids]
        )
        return ActivityCountResponse(count=updated)


class ClearActivitiesRequest(BaseModel):
    """Clear the whole log, or only one user's entries."""

    target_user_id: str | None = None
    user_id: str


class ClearActivitiesUseCase(BaseUseCase):
    """Use case for clearing the activity log."""

    def __init__(
        self, activity_service: ActivityService, user_service: UserService
    ) -> None:
        self.activity_service = activity_service
        self.user_service = user_service

    async def execute(self, request: ClearActivitiesRequest) -> ActivityCountResponse:
        """Execute clear flow.

        Raises:
            PermissionDeniedError: If user may not clear these entries
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        if request.target_user_id is None:
            removed = await self.activity_service.clear_all(caller)
        else:
            removed = await self.activity_service.clear_user(
                caller, UserId(UUID(request.target_user_id))
            )
        return ActivityCountResponse(count=removed)
