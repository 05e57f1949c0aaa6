"""PostgreSQL implementation of Claim repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from autohub.domain.model import BusinessClaim
from autohub.domain.repository import ClaimRepository
from autohub.domain.value import BusinessId, ClaimId, ClaimStatus, UserId
from autohub.persistence.mappers import claim_to_dict, row_to_claim
from autohub.persistence.tables import business_claims_table


class PostgresClaimRepository(ClaimRepository):
    """PostgreSQL implementation of ClaimRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, claim_id: ClaimId) -> Optional[BusinessClaim]:
        """Find a claim by ID."""
        result = await self.session.execute(
            select(business_claims_table).where(business_claims_table.c.id == claim_id)
        )
        row = result.mappings().first()
        return row_to_claim(row) if row else None

    async def find_by_status(self, status: ClaimStatus) -> List[BusinessClaim]:
        """All claims in a status, newest first."""
        result = await self.session.execute(
            select(business_claims_table)
            .where(business_claims_table.c.status == status.value)
            .order_by(desc(business_claims_table.c.created_at))
        )
        return [row_to_claim(row) for row in result.mappings().all()]

    async def find_pending_for(
        self, business_id: BusinessId, user_id: UserId
    ) -> Optional[BusinessClaim]:
        """A user's pending claim on a business, if any."""
        result = await self.session.execute(
            select(business_claims_table).where(
                business_claims_table.c.business_id == business_id,
                business_claims_table.c.user_id == user_id,
                business_claims_table.c.status == ClaimStatus.PENDING.value,
            )
        )
        row = result.mappings().first()
        return row_to_claim(row) if row else None

    async def save(self, claim: BusinessClaim) -> BusinessClaim:
        """Save a new claim."""
        await self.session.execute(
            insert(business_claims_table).values(**claim_to_dict(claim))
        )
        return claim

    async def decide(
        self,
        claim_id: ClaimId,
        status: ClaimStatus,
        reviewed_by: UserId,
        reviewed_at: datetime,
    ) -> Optional[BusinessClaim]:
        """Conditional UPDATE ... WHERE status = 'pending'."""
        result = await self.session.execute(
            update(business_claims_table)
            .where(
                business_claims_table.c.id == claim_id,
                business_claims_table.c.status == ClaimStatus.PENDING.value,
            )
            .values(status=status.value, reviewed_by=reviewed_by, reviewed_at=reviewed_at)
            .returning(*business_claims_table.c)
        )
        row = result.mappings().first()
        return row_to_claim(row) if row else None
