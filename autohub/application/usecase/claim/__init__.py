"""Business claim use cases."""

from .review_claims import (
    DecideClaimRequest,
    DecideClaimUseCase,
    ListPendingClaimsRequest,
    ListPendingClaimsUseCase,
)
from .submit_claim import ClaimResponse, SubmitClaimRequest, SubmitClaimUseCase

__all__ = [
    "ClaimResponse",
    "DecideClaimRequest",
    "DecideClaimUseCase",
    "ListPendingClaimsRequest",
    "ListPendingClaimsUseCase",
    "SubmitClaimRequest",
    "SubmitClaimUseCase",
]
