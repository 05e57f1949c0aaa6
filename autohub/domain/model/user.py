"""User aggregate root.

Credentials are held by the identity provider; this record is the profile
and the role used for permission checks.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from autohub.domain.model.common import DomainModel, utcnow
from autohub.domain.value import Caller, UserId, UserRole, UserStatus


class User(DomainModel):
    """User profile."""

    id: UserId
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    verified: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Emails are compared case-insensitively, so store them lowercase."""
        v = v.strip().lower()
        if "@" not in v:
            raise ValueError("Email must contain '@'")
        return v

    def as_caller(self) -> Caller:
        """Identity used when this user performs an operation."""
        return Caller(
            user_id=self.id, name=self.name, role=self.role, status=self.status
        )
