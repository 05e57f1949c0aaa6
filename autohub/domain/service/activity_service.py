"""Activity log domain service."""

from typing import List, Optional, Sequence
from uuid import uuid4

import logfire

from autohub.domain.model import Activity
from autohub.domain.policy import can_moderate, can_view_user_data, require
from autohub.domain.repository import ActivityRepository
from autohub.domain.value import ActivityId, ActivityType, Caller, UserId

from .base import Service


class ActivityService(Service):
    """Domain service for the activity log."""

    def __init__(self, activity_repository: ActivityRepository) -> None:
        """Initialize activity service.

        Args:
            activity_repository: Activity repository
        """
        self.activity_repository = activity_repository

    async def log(
        self,
        description: str,
        type: ActivityType,
        related_id: Optional[str] = None,
        user_id: Optional[UserId] = None,
    ) -> Activity:
        """Append an entry to the activity log.

        Args:
            description: Human readable summary
            type: Activity category
            related_id: Id of the record the entry is about
            user_id: User who performed the action

        Returns:
            The stored entry
        """
        activity = Activity(
            id=ActivityId(uuid4()),
            description=description[:500],
            type=type,
            related_id=related_id,
            user_id=user_id,
        )
        saved = await self.activity_repository.save(activity)
        logfire.info(
            "Activity logged",
            activity_type=type.value,
            related_id=related_id,
            user_id=str(user_id) if user_id else None,
        )
        return saved

    async def list_activities(
        self,
        caller: Caller,
        type: Optional[ActivityType] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[List[Activity], int]:
        """List entries for the admin dashboard.

        Returns:
            Tuple of (page of entries, total matching entries)

        Raises:
            PermissionDeniedError: If caller is not a moderator
        """
        with logfire.span(
            "list_activities",
            type=type.value if type else None,
            search=search,
            limit=limit,
            offset=offset,
        ):
            require(can_moderate(caller), caller, "list", "activities", "*")
            search = search.strip() if search else None
            total = await self.activity_repository.count(type=type, search=search)
            activities = await self.activity_repository.find_page(
                type=type, search=search, limit=limit, offset=offset
            )
            return activities, total

    async def recent_activities(self, caller: Caller, count: int) -> List[Activity]:
        """Latest entries of any kind."""
        require(can_moderate(caller), caller, "list", "activities", "recent")
        return await self.activity_repository.find_page(limit=count)

    async def user_activities(
        self, caller: Caller, user_id: UserId, count: int
    ) -> List[Activity]:
        """Latest entries performed by one user."""
        require(
            can_view_user_data(caller, user_id), caller, "list", "activities", str(user_id)
        )
        return await self.activity_repository.find_by_user(user_id, limit=count)

    async def mark_read(self, caller: Caller, activity_ids: Sequence[ActivityId]) -> int:
        """Flag entries as read. Unknown ids are ignored."""
        require(can_moderate(caller), caller, "update", "activities", "*")
        if not activity_ids:
            return 0
        updated = await self.activity_repository.mark_read(activity_ids)
        logfire.info("Activities marked read", requested=len(activity_ids), updated=updated)
        return updated

    async def clear_all(self, caller: Caller) -> int:
        """Remove every entry, then record who did it."""
        with logfire.span("clear_all_activities", user_id=str(caller.user_id)):
            require(can_moderate(caller), caller, "clear", "activities", "*")
            removed = await self.activity_repository.delete_all()
            await self.log(
                f"Activity log cleared by {caller.name}",
                ActivityType.DATA,
                user_id=caller.user_id,
            )
            logfire.info("Activity log cleared", removed=removed)
            return removed

    async def clear_user(self, caller: Caller, user_id: UserId) -> int:
        """Remove every entry performed by one user."""
        require(
            can_view_user_data(caller, user_id), caller, "clear", "activities", str(user_id)
        )
        return await self.activity_repository.delete_by_user(user_id)
