"""In-memory user repository for testing."""

from typing import List, Optional

from autohub.domain.model import User
from autohub.domain.repository import UserRepository
from autohub.domain.value import UserId, UserRole


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        email = email.strip().lower()
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_all(self, limit: int = 20, offset: int = 0) -> List[User]:
        users = sorted(self._users.values(), key=lambda u: u.created_at, reverse=True)
        return users[offset : offset + limit]

    async def count(self, role: Optional[UserRole] = None) -> int:
        if role is None:
            return len(self._users)
        return sum(1 for u in self._users.values() if u.role == role)

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        return self._users.pop(user_id, None) is not None
