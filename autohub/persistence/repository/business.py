"""PostgreSQL implementation of Business repository."""

from typing import Collection, List, Optional

import logfire
from sqlalchemy import Select, asc, delete, desc, func, or_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from autohub.domain.model import Business
from autohub.domain.repository import BusinessRepository, BusinessSortOrder
from autohub.domain.value import BusinessId, BusinessStatus, UserId
from autohub.persistence.mappers import business_to_dict, row_to_business
from autohub.persistence.tables import businesses_table


def _filtered(
    stmt: Select,
    statuses: Optional[Collection[BusinessStatus]] = None,
    owner_id: Optional[UserId] = None,
    category: Optional[str] = None,
    location: Optional[str] = None,
    search: Optional[str] = None,
    featured: Optional[bool] = None,
    verified: Optional[bool] = None,
) -> Select:
    t = businesses_table.c
    if statuses is not None:
        stmt = stmt.where(t.status.in_([s.value for s in statuses]))
    if owner_id is not None:
        stmt = stmt.where(t.owner_id == owner_id)
    if category:
        stmt = stmt.where(t.category == category)
    if location:
        stmt = stmt.where(t.location == location)
    if search:
        pattern = f"%{search}%"
        stmt = stmt.where(or_(t.title.ilike(pattern), t.description.ilike(pattern)))
    if featured is not None:
        stmt = stmt.where(t.featured.is_(featured))
    if verified is not None:
        stmt = stmt.where(t.verified.is_(verified))
    return stmt


class PostgresBusinessRepository(BusinessRepository):
    """PostgreSQL implementation of BusinessRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, business_id: BusinessId) -> Optional[Business]:
        """Find a business by ID."""
        result = await self.session.execute(
            select(businesses_table).where(businesses_table.c.id == business_id)
        )
        row = result.mappings().first()
        return row_to_business(row) if row else None

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
        """Find businesses matching the filters."""
        with logfire.span(
            "business_repository.find_all",
            category=category,
            location=location,
            search=search,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = _filtered(
                select(businesses_table),
                statuses=statuses,
                owner_id=owner_id,
                category=category,
                location=location,
                search=search,
                featured=featured,
            )
            order = (
                desc(businesses_table.c.created_at)
                if sort == BusinessSortOrder.NEWEST
                else asc(businesses_table.c.created_at)
            )
            stmt = stmt.order_by(order, asc(businesses_table.c.id)).limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            return [row_to_business(row) for row in result.mappings().all()]

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
        stmt = _filtered(
            select(func.count()).select_from(businesses_table),
            statuses=statuses,
            owner_id=owner_id,
            category=category,
            location=location,
            search=search,
            featured=featured,
            verified=verified,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, business: Business) -> Business:
        """Save a business (create or update)."""
        values = business_to_dict(business)
        stmt = pg_insert(businesses_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[businesses_table.c.id],
            set_={k: v for k, v in values.items() if k not in ("id", "created_at")},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return business

    async def delete(self, business_id: BusinessId) -> bool:
        """Delete a business."""
        result = await self.session.execute(
            delete(businesses_table)
            .where(businesses_table.c.id == business_id)
            .returning(businesses_table.c.id)
        )
        return result.first() is not None
