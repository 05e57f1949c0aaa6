"""PostgreSQL implementation of Vehicle repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import Select, asc, delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from autohub.domain.model import Vehicle
from autohub.domain.repository import VehicleRepository, VehicleSortOrder
from autohub.domain.value import VehicleId
from autohub.persistence.mappers import row_to_vehicle, vehicle_to_dict
from autohub.persistence.tables import vehicles_table


def _filtered(
    stmt: Select,
    make: Optional[str] = None,
    body_type: Optional[str] = None,
    year: Optional[int] = None,
    search: Optional[str] = None,
) -> Select:
    t = vehicles_table.c
    if make:
        stmt = stmt.where(t.make == make)
    if body_type:
        stmt = stmt.where(t.body_type == body_type)
    if year is not None:
        stmt = stmt.where(t.year == year)
    if search:
        stmt = stmt.where(t.name.ilike(f"%{search}%"))
    return stmt


class PostgresVehicleRepository(VehicleRepository):
    """PostgreSQL implementation of VehicleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, vehicle_id: VehicleId) -> Optional[Vehicle]:
        """Find a vehicle by ID."""
        result = await self.session.execute(
            select(vehicles_table).where(vehicles_table.c.id == vehicle_id)
        )
        row = result.mappings().first()
        return row_to_vehicle(row) if row else None

    async def find_all(
        self,
        make: Optional[str] = None,
        body_type: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
        sort: VehicleSortOrder = VehicleSortOrder.NEWEST,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Vehicle]:
        """Find vehicles matching the filters."""
        with logfire.span(
            "vehicle_repository.find_all",
            make=make,
            body_type=body_type,
            year=year,
            search=search,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = _filtered(
                select(vehicles_table),
                make=make,
                body_type=body_type,
                year=year,
                search=search,
            )
            order = (
                desc(vehicles_table.c.created_at)
                if sort == VehicleSortOrder.NEWEST
                else asc(vehicles_table.c.created_at)
            )
            stmt = stmt.order_by(order, asc(vehicles_table.c.id)).limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            return [row_to_vehicle(row) for row in result.mappings().all()]

    async def count(
        self,
        make: Optional[str] = None,
        body_type: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count vehicles matching the filters."""
        stmt = _filtered(
            select(func.count()).select_from(vehicles_table),
            make=make,
            body_type=body_type,
            year=year,
            search=search,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, vehicle: Vehicle) -> Vehicle:
        """Save a vehicle (create or update)."""
        values = vehicle_to_dict(vehicle)
        stmt = pg_insert(vehicles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[vehicles_table.c.id],
            set_={k: v for k, v in values.items() if k not in ("id", "created_at")},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return vehicle

    async def delete(self, vehicle_id: VehicleId) -> bool:
        """Delete a vehicle."""
        result = await self.session.execute(
            delete(vehicles_table)
            .where(vehicles_table.c.id == vehicle_id)
            .returning(vehicles_table.c.id)
        )
        return result.first() is not None

    async def delete_many(self, vehicle_ids: Sequence[VehicleId]) -> int:
        """Delete several vehicles in one statement."""
        if not vehicle_ids:
            return 0
        result = await self.session.execute(
            delete(vehicles_table)
            .where(vehicles_table.c.id.in_(list(vehicle_ids)))
            .returning(vehicles_table.c.id)
        )
        return len(result.all())
