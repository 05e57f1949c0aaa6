"""Business repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Collection, List, Optional

from autohub.domain.model import Business
from autohub.domain.value import BusinessId, BusinessStatus, UserId


class BusinessSortOrder(str, Enum):
    """Sort order for business lists."""

    NEWEST = "newest"
    OLDEST = "oldest"


class BusinessRepository(ABC):
    """Repository for Business aggregate.

    Query methods share one set of filters; every filter left as None is
    not applied.
    """

    @abstractmethod
    async def find_by_id(self, business_id: BusinessId) -> Optional[Business]:
        """Find a business by ID.

        Args:
            business_id: The business's unique identifier

        Returns:
            The business if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        statuses: Optional[Collection[BusinessStatus]] = None,
        owner_id: Optional[UserId] = None,
        category: Optional[str] = None,
        location: Optional[str] = None,
        search: Optional[str] = None,
        featured: Optional[bool] = None,
        sort: BusinessSortOrder = BusinessSortOrder.NEWEST,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Business]:
        """Find businesses matching the filters.

        Args:
            statuses: Only businesses in one of these statuses
            owner_id: Only businesses owned by this user
            category: Exact category
            location: Exact location (country)
            search: Case-insensitive substring of the title or description
            featured: Only featured (True) or non-featured (False) businesses
            sort: Sort order by creation time
            limit: Maximum number of businesses to return
            offset: Number of businesses to skip

        Returns:
            One page of businesses
        """
        pass

    @abstractmethod
    async def count(
        self,
        statuses: Optional[Collection[BusinessStatus]] = None,
        owner_id: Optional[UserId] = None,
        category: Optional[str] = None,
        location: Optional[str] = None,
        search: Optional[str] = None,
        featured: Optional[bool] = None,
        verified: Optional[bool] = None,
    ) -> int:
        """Count businesses matching the filters."""
        pass

    @abstractmethod
    async def save(self, business: Business) -> Business:
        """Save a business (create or update)."""
        pass

    @abstractmethod
    async def delete(self, business_id: BusinessId) -> bool:
        """Delete a business.

        Returns:
            True if a business was deleted, False if none existed
        """
        pass
