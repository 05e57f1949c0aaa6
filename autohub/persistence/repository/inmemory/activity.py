"""In-memory activity repository for testing."""

from typing import List, Optional, Sequence

from autohub.domain.model import Activity
from autohub.domain.repository import ActivityRepository
from autohub.domain.value import ActivityId, ActivityType, UserId


class InMemoryActivityRepository(ActivityRepository):
    """In-memory implementation of ActivityRepository for testing."""

    def __init__(self) -> None:
        self._activities: dict[ActivityId, Activity] = {}

    def _matching(
        self, type: Optional[ActivityType], search: Optional[str]
    ) -> List[Activity]:
        activities = list(self._activities.values())
        if type is not None:
            activities = [a for a in activities if a.type == type]
        if search:
            needle = search.lower()
            activities = [a for a in activities if needle in a.description.lower()]
        return activities

    async def save(self, activity: Activity) -> Activity:
        self._activities[activity.id] = activity
        return activity

    async def find_page(
        self,
        type: Optional[ActivityType] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Activity]:
        """Find entries matching the filters, newest first."""
        activities = self._matching(type, search)
        activities.sort(key=lambda a: a.timestamp, reverse=True)
        return activities[offset : offset + limit]

    async def count(
        self,
        type: Optional[ActivityType] = None,
        search: Optional[str] = None,
    ) -> int:
        return len(self._matching(type, search))

    async def find_by_user(self, user_id: UserId, limit: int = 20) -> List[Activity]:
        activities = [a for a in self._activities.values() if a.user_id == user_id]
        activities.sort(key=lambda a: a.timestamp, reverse=True)
        return activities[:limit]

    async def mark_read(self, activity_ids: Sequence[ActivityId]) -> int:
        marked = 0
        for activity_id in activity_ids:
            activity = self._activities.get(activity_id)
            if activity is not None:
                self._activities[activity_id] = activity.model_copy(update={"read": True})
                marked += 1
        return marked

    async def delete_all(self) -> int:
        removed = len(self._activities)
        self._activities.clear()
        return removed

    async def delete_by_user(self, user_id: UserId) -> int:
        doomed = [a.id for a in self._activities.values() if a.user_id == user_id]
        for activity_id in doomed:
            del self._activities[activity_id]
        return len(doomed)
