"""PostgreSQL implementation of SiteSettings repository."""

from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from autohub.domain.model import SettingsKind
from autohub.domain.repository import SiteSettingsRepository
from autohub.persistence.tables import site_settings_table


class PostgresSiteSettingsRepository(SiteSettingsRepository):
    """One JSONB row per settings kind."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, kind: SettingsKind) -> Optional[dict[str, Any]]:
        result = await self.session.execute(
            select(site_settings_table.c.data).where(
                site_settings_table.c.kind == kind.value
            )
        )
        return result.scalar_one_or_none()

    async def save(self, kind: SettingsKind, data: dict[str, Any]) -> dict[str, Any]:
        stmt = pg_insert(site_settings_table).values(kind=kind.value, data=data)
        stmt = stmt.on_conflict_do_update(
            index_elements=[site_settings_table.c.kind],
            set_={"data": stmt.excluded.data, "updated_at": func.now()},
        )
        await self.session.execute(stmt)
        return data
