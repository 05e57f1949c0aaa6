"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from autohub.domain.model import User
from autohub.domain.repository import UserRepository
from autohub.domain.value import UserId, UserRole
from autohub.persistence.mappers import row_to_user, user_to_dict
from autohub.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(row) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(
            func.lower(users_table.c.email) == email.strip().lower()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(row) if row else None

    async def find_all(self, limit: int = 20, offset: int = 0) -> List[User]:
        """List users, newest first."""
        stmt = (
            select(users_table)
            .order_by(desc(users_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(row) for row in result.mappings().all()]

    async def count(self, role: Optional[UserRole] = None) -> int:
        """Count users, optionally only those with a role."""
        stmt = select(func.count()).select_from(users_table)
        if role is not None:
            stmt = stmt.where(users_table.c.role == role.value)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        values = user_to_dict(user)
        stmt = pg_insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={k: v for k, v in values.items() if k not in ("id", "created_at")},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        result = await self.session.execute(
            delete(users_table)
            .where(users_table.c.id == user_id)
            .returning(users_table.c.id)
        )
        return result.first() is not None
