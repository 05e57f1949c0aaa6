"""Activity log entry.

Every mutation appends one of these; the admin dashboard reads them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from autohub.domain.model.common import DomainModel, utcnow
from autohub.domain.value import ActivityId, ActivityType, UserId


class Activity(DomainModel):
    """A single entry in the activity log."""

    id: ActivityId
    description: str = Field(min_length=1, max_length=500)
    type: ActivityType
    timestamp: datetime = Field(default_factory=utcnow)
    user_id: Optional[UserId] = None  # Who did it, if anyone
    related_id: Optional[str] = None  # Id of the record it is about
    read: bool = False
