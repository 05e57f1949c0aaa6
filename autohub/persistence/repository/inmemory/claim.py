"""In-memory claim repository for testing."""

from datetime import datetime
from typing import List, Optional

from autohub.domain.model import BusinessClaim
from autohub.domain.repository import ClaimRepository
from autohub.domain.value import BusinessId, ClaimId, ClaimStatus, UserId


class InMemoryClaimRepository(ClaimRepository):
    """In-memory implementation of ClaimRepository for testing."""

    def __init__(self) -> None:
        self._claims: dict[ClaimId, BusinessClaim] = {}

    async def find_by_id(self, claim_id: ClaimId) -> Optional[BusinessClaim]:
        return self._claims.get(claim_id)

    async def find_by_status(self, status: ClaimStatus) -> List[BusinessClaim]:
        claims = [c for c in self._claims.values() if c.status == status]
        claims.sort(key=lambda c: c.created_at, reverse=True)
        return claims

    async def find_pending_for(
        self, business_id: BusinessId, user_id: UserId
    ) -> Optional[BusinessClaim]:
        for claim in self._claims.values():
            if (
                claim.business_id == business_id
                and claim.user_id == user_id
                and claim.status == ClaimStatus.PENDING
            ):
                return claim
        return None

    async def save(self, claim: BusinessClaim) -> BusinessClaim:
        self._claims[claim.id] = claim
        return claim

    async def decide(
        self,
        claim_id: ClaimId,
        status: ClaimStatus,
        reviewed_by: UserId,
        reviewed_at: datetime,
    ) -> Optional[BusinessClaim]:
        """Move a pending claim to its final status; None if not pending."""
        claim = self._claims.get(claim_id)
        if claim is None or claim.status != ClaimStatus.PENDING:
            return None
        decided = claim.model_copy(
            update={
                "status": status,
                "reviewed_by": reviewed_by,
                "reviewed_at": reviewed_at,
            }
        )
        self._claims[claim_id] = decided
        return decided
