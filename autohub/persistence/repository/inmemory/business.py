"""In-memory business repository for testing."""

from typing import Collection, List, Optional

from autohub.domain.model import Business
from autohub.domain.repository import BusinessRepository, BusinessSortOrder
from autohub.domain.value import BusinessId, BusinessStatus, UserId


class InMemoryBusinessRepository(BusinessRepository):
    """In-memory implementation of BusinessRepository for testing."""

    def __init__(self) -> None:
        self._businesses: dict[BusinessId, Business] = {}

    def _matching(
        self,
        statuses: Optional[Collection[BusinessStatus]] = None,
        owner_id: Optional[UserId] = None,
        category: Optional[str] = None,
        location: Optional[str] = None,
        search: Optional[str] = None,
        featured: Optional[bool] = None,
        verified: Optional[bool] = None,
    ) -> List[Business]:
        businesses = list(self._businesses.values())
        if statuses is not None:
            businesses = [b for b in businesses if b.status in statuses]
        if owner_id is not None:
            businesses = [b for b in businesses if b.owner_id == owner_id]
        if category:
            businesses = [b for b in businesses if b.category == category]
        if location:
            businesses = [b for b in businesses if b.location == location]
        if search:
            needle = search.lower()
            businesses = [
                b
                for b in businesses
                if needle in b.title.lower() or needle in b.description.lower()
            ]
        if featured is not None:
            businesses = [b for b in businesses if b.featured == featured]
        if verified is not None:
            businesses = [b for b in businesses if b.verified == verified]
        return businesses

    async def find_by_id(self, business_id: BusinessId) -> Optional[Business]:
        return self._businesses.get(business_id)

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
        """Find businesses with filtering and pagination."""
        businesses = self._matching(
            statuses=statuses,
            owner_id=owner_id,
            category=category,
            location=location,
            search=search,
            featured=featured,
        )
        businesses.sort(
            key=lambda b: b.created_at, reverse=sort == BusinessSortOrder.NEWEST
        )
        return businesses[offset : offset + limit]

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
        return len(
            self._matching(
                statuses=statuses,
                owner_id=owner_id,
                category=category,
                location=location,
                search=search,
                featured=featured,
                verified=verified,
            )
        )

    async def save(self, business: Business) -> Business:
        self._businesses[business.id] = business
        return business

    async def delete(self, business_id: BusinessId) -> bool:
        return self._businesses.pop(business_id, None) is not None
