"""Business claim routes."""

from typing import Literal
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from autohub.application.usecase.auth import GetCurrentUserUseCase
from autohub.application.usecase.claim import (
    ClaimResponse,
    DecideClaimRequest,
    DecideClaimUseCase,
    ListPendingClaimsRequest,
    ListPendingClaimsUseCase,
    SubmitClaimRequest,
    SubmitClaimUseCase,
)
from autohub.interface.api.session import authenticate

router = APIRouter(prefix="/claims", tags=["claims"], route_class=DishkaRoute)


class SubmitClaimAPIRequest(BaseModel):
    business_id: UUID
    verification_details: str = Field(min_length=1, max_length=5000)


class DecideClaimAPIRequest(BaseModel):
    decision: Literal["approve", "reject"]


@router.post("", response_model=ClaimResponse, status_code=status.HTTP_201_CREATED)
async def submit_claim(
    request: SubmitClaimAPIRequest,
    submit_claim_use_case: FromDishka[SubmitClaimUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ClaimResponse:
    """Ask to take over ownership of a listing."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await submit_claim_use_case.execute(
        SubmitClaimRequest(
            business_id=str(request.business_id),
            verification_details=request.verification_details,
            user_id=user.user_id,
        )
    )


@router.get("/pending", response_model=list[ClaimResponse])
async def list_pending_claims(
    list_pending_claims_use_case: FromDishka[ListPendingClaimsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> list[ClaimResponse]:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await list_pending_claims_use_case.execute(
        ListPendingClaimsRequest(user_id=user.user_id)
    )


@router.post("/{claim_id}/decision", response_model=ClaimResponse)
async def decide_claim(
    claim_id: UUID,
    request: DecideClaimAPIRequest,
    decide_claim_use_case: FromDishka[DecideClaimUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> ClaimResponse:
    """Approve or reject a pending claim.

    Approval hands the listing to the claimant.
    """
    user = await authenticate(auth_token, get_current_user_use_case)
    return await decide_claim_use_case.execute(
        DecideClaimRequest(
            claim_id=str(claim_id), decision=request.decision, user_id=user.user_id
        )
    )
