"""Activity repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from autohub.domain.model import Activity
from autohub.domain.value import ActivityId, ActivityType, UserId


class ActivityRepository(ABC):
    """Repository for the activity log.

    Entries are always returned newest first.
    """

    @abstractmethod
    async def save(self, activity: Activity) -> Activity:
        """Append an entry."""
        pass

    @abstractmethod
    async def find_page(
        self,
        type: Optional[ActivityType] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Activity]:
        """Find entries matching the filters.

        Args:
            type: Only entries of this type
            search: Case-insensitive substring of the description
            limit: Maximum number of entries to return
            offset: Number of entries to skip

        Returns:
            One page of entries
        """
        pass

    @abstractmethod
    async def count(
        self,
        type: Optional[ActivityType] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count entries matching the same filters as ``find_page``."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId, limit: int = 20) -> List[Activity]:
        """Latest entries performed by one user."""
        pass

    @abstractmethod
    async def mark_read(self, activity_ids: Sequence[ActivityId]) -> int:
        """Flag entries as read.

        Ids that do not exist are ignored.

        Returns:
            Number of entries updated
        """
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> int:
        """Remove every entry performed by one user.

        Returns:
            Number of entries removed
        """
        pass
