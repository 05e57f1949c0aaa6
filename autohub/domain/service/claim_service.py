"""Business claim domain service."""

from typing import List
from uuid import uuid4

import logfire

from autohub.domain.error import BusinessRuleViolationError, NotFoundError
from autohub.domain.model import BusinessClaim, User
from autohub.domain.model.common import utcnow
from autohub.domain.policy import can_moderate, can_participate, require
from autohub.domain.repository import ClaimRepository
from autohub.domain.value import (
    ActivityType,
    BusinessId,
    Caller,
    ClaimId,
    ClaimStatus,
)

from .activity_service import ActivityService
from .base import Service
from .business_service import BusinessService
from .user_service import UserService


class ClaimService(Service):
    """Domain service for ownership claims."""

    def __init__(
        self,
        claim_repository: ClaimRepository,
        business_service: BusinessService,
        user_service: UserService,
        activity_service: ActivityService,
    ) -> None:
        """Initialize claim service.

        Args:
            claim_repository: Claim repository
            business_service: Business domain service
            user_service: User domain service
            activity_service: Activity log service
        """
        self.claim_repository = claim_repository
        self.business_service = business_service
        self.user_service = user_service
        self.activity_service = activity_service

    async def submit_claim(
        self,
        caller: Caller,
        claimant: User,
        business_id: BusinessId,
        verification_details: str,
    ) -> BusinessClaim:
        """File a claim for a listing.

        Raises:
            PermissionDeniedError: If caller is suspended
            NotFoundError: If business doesn't exist
            BusinessRuleViolationError: If the caller already owns the
                listing or has a pending claim on it
        """
        with logfire.span(
            "submit_claim", business_id=str(business_id), user_id=str(caller.user_id)
        ):
            require(can_participate(caller), caller, "claim", "business", str(business_id))
            business = await self.business_service.get_business_by_id(business_id)

            if business.owner_id == caller.user_id:
                raise BusinessRuleViolationError("You already own this business")
            if await self.claim_repository.find_pending_for(business_id, caller.user_id):
                raise BusinessRuleViolationError(
                    "You already have a pending claim for this business"
                )

            claim = BusinessClaim(
                id=ClaimId(uuid4()),
                business_id=business_id,
                business_name=business.title,
                user_id=caller.user_id,
                user_name=claimant.name,
                user_email=claimant.email,
                verification_details=verification_details.strip(),
            )
            saved = await self.claim_repository.save(claim)

            await self.activity_service.log(
                f"{claimant.name} claimed business {business.title}",
                ActivityType.CLAIM,
                related_id=str(saved.id),
                user_id=caller.user_id,
            )
            return saved

    async def list_pending(self, caller: Caller) -> List[BusinessClaim]:
        """Claims waiting for a decision.

        Raises:
            PermissionDeniedError: If caller is not a moderator
        """
        require(can_moderate(caller), caller, "list", "claims", "pending")
        return await self.claim_repository.find_by_status(ClaimStatus.PENDING)

    async def approve_claim(self, caller: Caller, claim_id: ClaimId) -> BusinessClaim:
        """Approve a claim and hand the listing to the claimant.

        The listing becomes verified and a plain user claimant is promoted
        to Business Owner.

        Raises:
            PermissionDeniedError: If caller is not a moderator
            NotFoundError: If claim or business doesn't exist
            BusinessRuleViolationError: If the claim was already decided
        """
        with logfire.span("approve_claim", claim_id=str(claim_id)):
            require(can_moderate(caller), caller, "approve", "claim", str(claim_id))

            claim = await self._get_pending(claim_id)
            # Fail before deciding if the listing is gone
            await self.business_service.get_business_by_id(claim.business_id)

            decided = await self._decide(caller, claim_id, ClaimStatus.APPROVED)
            await self.business_service.transfer_ownership(
                decided.business_id, decided.user_id, decided.user_name
            )
            await self.user_service.promote_to_business_owner(decided.user_id)

            await self.activity_service.log(
                f"Claim approved: {decided.business_name} now owned by {decided.user_name}",
                ActivityType.CLAIM,
                related_id=str(claim_id),
                user_id=caller.user_id,
            )
            return decided

    async def reject_claim(self, caller: Caller, claim_id: ClaimId) -> BusinessClaim:
        """Reject a claim.

        Raises:
            PermissionDeniedError: If caller is not a moderator
            NotFoundError: If claim doesn't exist
            BusinessRuleViolationError: If the claim was already decided
        """
        with logfire.span("reject_claim", claim_id=str(claim_id)):
            require(can_moderate(caller), caller, "reject", "claim", str(claim_id))
            await self._get_pending(claim_id)
            decided = await self._decide(caller, claim_id, ClaimStatus.REJECTED)

            await self.activity_service.log(
                f"Claim rejected: {decided.business_name} by {decided.user_name}",
                ActivityType.CLAIM,
                related_id=str(claim_id),
                user_id=caller.user_id,
            )
            return decided

    async def _get_pending(self, claim_id: ClaimId) -> BusinessClaim:
        claim = await self.claim_repository.find_by_id(claim_id)
        if claim is None:
            raise NotFoundError("Claim", str(claim_id))
        if claim.status != ClaimStatus.PENDING:
            raise BusinessRuleViolationError("Claim has already been processed")
        return claim

    async def _decide(
        self, caller: Caller, claim_id: ClaimId, status: ClaimStatus
    ) -> BusinessClaim:
        decided = await self.claim_repository.decide(
            claim_id, status, reviewed_by=caller.user_id, reviewed_at=utcnow()
        )
        if decided is None:
            # Another moderator decided it between our read and write
            logfire.warn("Claim decided concurrently", claim_id=str(claim_id))
            raise BusinessRuleViolationError("Claim has already been processed")
        return decided
