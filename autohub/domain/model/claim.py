"""Business ownership claim."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from autohub.domain.model.common import DomainModel, utcnow
from autohub.domain.value import BusinessId, ClaimId, ClaimStatus, UserId


class BusinessClaim(DomainModel):
    """A user's request to be recognised as the owner of a listing.

    Business rules:
    - Claims start pending and are decided exactly once
    - Approving moves ownership to the claimant and verifies the listing
    """

    id: ClaimId
    business_id: BusinessId
    business_name: str
    user_id: UserId
    user_name: str
    user_email: str
    verification_details: str = Field(min_length=1, max_length=2000)
    status: ClaimStatus = ClaimStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[UserId] = None
