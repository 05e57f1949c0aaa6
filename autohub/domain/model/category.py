"""Business directory category."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from autohub.domain.model.common import DomainModel, utcnow
from autohub.domain.value import CategoryId

# Seeded into an empty catalogue by seed_initial_categories
INITIAL_CATEGORY_NAMES = (
    "Car Wash & Detailing",
    "Service Centres",
    "Dealerships",
    "Pre Owned Car Dealers",
    "Showrooms",
    "Insurance & Protection",
    "Car Rentals",
    "Parts & Accessories",
    "Customs & Modifications",
    "Other Services",
)


class Category(DomainModel):
    """A directory category. Names are unique, compared case-insensitively."""

    id: CategoryId
    name: str = Field(min_length=1, max_length=100)
    image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
