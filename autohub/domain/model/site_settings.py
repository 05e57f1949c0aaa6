"""Administrator-managed site settings.

Each kind of settings is stored as one document and merged over the
defaults declared here, so new fields appear without a migration.
"""

from enum import Enum

from pydantic import Field, field_validator

from autohub.domain.model.common import DomainModel
from autohub.domain.value import UserRole


class SettingsKind(str, Enum):
    """Settings documents an administrator can edit."""

    SECURITY = "security"
    SEO = "seo"


class SecuritySettings(DomainModel):
    """Registration policy."""

    allow_registration: bool = True
    default_user_role: UserRole = UserRole.USER

    @field_validator("default_user_role")
    @classmethod
    def validate_default_role(cls, v: UserRole) -> UserRole:
        """Self-registered users can never start as staff above Author."""
        if v not in (UserRole.USER, UserRole.BUSINESS_OWNER, UserRole.AUTHOR):
            raise ValueError("Default role must be User, Business Owner or Author")
        return v


class SeoSettings(DomainModel):
    """Search engine metadata served to the frontend."""

    site_title: str = Field(default="AutoHub", max_length=100)
    meta_title: str = Field(default="AutoHub - Automotive community", max_length=200)
    meta_description: str = Field(default="", max_length=500)
    meta_keywords: list[str] = Field(default_factory=list)
    robots_txt: str = Field(default="User-agent: *\nAllow: /", max_length=5000)


SETTINGS_MODELS: dict[SettingsKind, type[DomainModel]] = {
    SettingsKind.SECURITY: SecuritySettings,
    SettingsKind.SEO: SeoSettings,
}
