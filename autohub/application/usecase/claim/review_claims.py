"""Claim moderation use cases."""

from typing import Literal
from uuid import UUID

import logfire
from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.claim.submit_claim import ClaimResponse
from autohub.domain.service import ClaimService, UserService
from autohub.domain.value import ClaimId


class ListPendingClaimsRequest(BaseModel):
    user_id: str


class ListPendingClaimsUseCase(BaseUseCase):
    """Use case for the claims queue."""

    def __init__(self, claim_service: ClaimService, user_service: UserService) -> None:
        self.claim_service = claim_service
        self.user_service = user_service

    async def execute(self, request: ListPendingClaimsRequest) -> list[ClaimResponse]:
        """Execute list pending claims flow.

        Raises:
            PermissionDeniedError: If user is not a moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        claims = await self.claim_service.list_pending(caller)
        return [ClaimResponse.from_claim(c) for c in claims]


class DecideClaimRequest(BaseModel):
    """Approve or reject a pending claim."""

    claim_id: str
    decision: Literal["approve", "reject"]
    user_id: str


class DecideClaimUseCase(BaseUseCase):
    """Use case for deciding a claim."""

    def __init__(self, claim_service: ClaimService, user_service: UserService) -> None:
        """Initialize decide claim use case.

        Args:
            claim_service: Claim domain service
            user_service: User domain service
        """
        self.claim_service = claim_service
        self.user_service = user_service

    async def execute(self, request: DecideClaimRequest) -> ClaimResponse:
        """Execute decide claim flow.

        Approval hands the listing to the claimant in the same request
        transaction.

        Raises:
            NotFoundError: If claim, business or user not found
            PermissionDeniedError: If user is not a moderator
            BusinessRuleViolationError: If the claim was already decided
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        claim_id = ClaimId(UUID(request.claim_id))

        with logfire.span("decide_claim.execute", decision=request.decision):
            if request.decision == "approve":
                claim = await self.claim_service.approve_claim(caller, claim_id)
            else:
                claim = await self.claim_service.reject_claim(caller, claim_id)
            return ClaimResponse.from_claim(claim)
