"""PostgreSQL implementation of Activity repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import Select, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from autohub.domain.model import Activity
from autohub.domain.repository import ActivityRepository
from autohub.domain.value import ActivityId, ActivityType, UserId
from autohub.persistence.mappers import activity_to_dict, row_to_activity
from autohub.persistence.tables import activities_table


def _filtered(
    stmt: Select, type: Optional[ActivityType], search: Optional[str]
) -> Select:
    if type is not None:
        stmt = stmt.where(activities_table.c.type == type.value)
    if search:
        stmt = stmt.where(activities_table.c.description.ilike(f"%{search}%"))
    return stmt


class PostgresActivityRepository(ActivityRepository):
    """PostgreSQL implementation of ActivityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, activity: Activity) -> Activity:
        """Append an entry."""
        await self.session.execute(
            insert(activities_table).values(**activity_to_dict(activity))
        )
        return activity

    async def find_page(
        self,
        type: Optional[ActivityType] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Activity]:
        """Find entries matching the filters, newest first."""
        with logfire.span(
            "activity_repository.find_page",
            type=type.value if type else None,
            search=search,
        ):
            stmt = _filtered(select(activities_table), type, search)
            stmt = (
                stmt.order_by(desc(activities_table.c.timestamp))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_activity(row) for row in result.mappings().all()]

    async def count(
        self,
        type: Optional[ActivityType] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count entries matching the filters."""
        stmt = _filtered(select(func.count()).select_from(activities_table), type, search)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_user(self, user_id: UserId, limit: int = 20) -> List[Activity]:
        """Latest entries performed by one user."""
        stmt = (
            select(activities_table)
            .where(activities_table.c.user_id == user_id)
            .order_by(desc(activities_table.c.timestamp))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_activity(row) for row in result.mappings().all()]

    async def mark_read(self, activity_ids: Sequence[ActivityId]) -> int:
        """Flag entries as read; unknown ids are ignored."""
        result = await self.session.execute(
            update(activities_table)
            .where(activities_table.c.id.in_(list(activity_ids)))
            .values(read=True)
        )
        return result.rowcount or 0

    async def delete_all(self) -> int:
        """Remove every entry."""
        result = await self.session.execute(delete(activities_table))
        return result.rowcount or 0

    async def delete_by_user(self, user_id: UserId) -> int:
        """Remove every entry performed by one user."""
        result = await self.session.execute(
            delete(activities_table).where(activities_table.c.user_id == user_id)
        )
        return result.rowcount or 0
