"""Business claim repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from autohub.domain.model import BusinessClaim
from autohub.domain.value import BusinessId, ClaimId, ClaimStatus, UserId


class ClaimRepository(ABC):
    """Repository for BusinessClaim entity."""

    @abstractmethod
    async def find_by_id(self, claim_id: ClaimId) -> Optional[BusinessClaim]:
        """Find a claim by ID."""
        pass

    @abstractmethod
    async def find_by_status(self, status: ClaimStatus) -> List[BusinessClaim]:
        """All claims in a status, newest first."""
        pass

    @abstractmethod
    async def find_pending_for(
        self, business_id: BusinessId, user_id: UserId
    ) -> Optional[BusinessClaim]:
        """A user's pending claim on a business, if any."""
        pass

    @abstractmethod
    async def save(self, claim: BusinessClaim) -> BusinessClaim:
        """Save a new claim."""
        pass

    @abstractmethod
    async def decide(
        self,
        claim_id: ClaimId,
        status: ClaimStatus,
        reviewed_by: UserId,
        reviewed_at: datetime,
    ) -> Optional[BusinessClaim]:
        """Move a claim out of pending, only if it is still pending.

        This is a compare-and-set on the status, so two moderators deciding
        the same claim cannot both succeed.

        Args:
            claim_id: Claim to decide
            status: Approved or rejected
            reviewed_by: Moderator making the decision
            reviewed_at: Decision time

        Returns:
            The decided claim, or None if it does not exist or was not
            pending
        """
        pass
