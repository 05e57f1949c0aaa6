"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from autohub.domain.model import User
from autohub.domain.value import UserId, UserRole


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive).

        Args:
            email: Email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 20, offset: int = 0) -> List[User]:
        """List users, newest first."""
        pass

    @abstractmethod
    async def count(self, role: Optional[UserRole] = None) -> int:
        """Count users, optionally only those with a role."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Returns:
            True if a user was deleted, False if none existed
        """
        pass
