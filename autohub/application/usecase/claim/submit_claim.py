"""Submit claim use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase
from autohub.domain.model import BusinessClaim
from autohub.domain.service import ClaimService, UserService
from autohub.domain.value import BusinessId, ClaimStatus, UserId


class ClaimResponse(BaseModel):
    """Ownership claim."""

    claim_id: str
    business_id: str
    business_name: str
    user_id: str
    user_name: str
    user_email: str
    verification_details: str
    status: ClaimStatus
    created_at: datetime
    reviewed_at: datetime | None
    reviewed_by: str | None

    @classmethod
    def from_claim(cls, claim: BusinessClaim) -> "ClaimResponse":
        return cls(
            claim_id=str(claim.id),
            business_id=str(claim.business_id),
            business_name=claim.business_name,
            user_id=str(claim.user_id),
            user_name=claim.user_name,
            user_email=claim.user_email,
            verification_details=claim.verification_details,
            status=claim.status,
            created_at=claim.created_at,
            reviewed_at=claim.reviewed_at,
            reviewed_by=str(claim.reviewed_by) if claim.reviewed_by else None,
        )


class SubmitClaimRequest(BaseModel):
    """Submit claim request."""

    business_id: str
    verification_details: str
    user_id: str


class SubmitClaimUseCase(BaseUseCase):
    """Use case for claiming ownership of a listing."""

    def __init__(self, claim_service: ClaimService, user_service: UserService) -> None:
        """Initialize submit claim use case.

        Args:
            claim_service: Claim domain service
            user_service: User domain service
        """
        self.claim_service = claim_service
        self.user_service = user_service

    async def execute(self, request: SubmitClaimRequest) -> ClaimResponse:
        """Execute submit claim flow.

        Raises:
            NotFoundError: If business or user not found
            PermissionDeniedError: If user is suspended
            BusinessRuleViolationError: If the user owns the listing or
                already has a pending claim on it
        """
        # Claims copy the claimant's name and email, so load the full profile
        claimant = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        claim = await self.claim_service.submit_claim(
            claimant.as_caller(),
            claimant,
            BusinessId(UUID(request.business_id)),
            request.verification_details,
        )
        return ClaimResponse.from_claim(claim)
