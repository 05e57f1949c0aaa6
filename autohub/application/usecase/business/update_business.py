"""Update business use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.business.get_business import (
    BusinessResponse,
    with_ratings,
)
from autohub.domain.service import BusinessService, UserService
from autohub.domain.value import BusinessId


class UpdateBusinessRequest(BaseModel):
    """Update business request; only the fields present are changed."""

    business_id: str
    changes: dict[str, Any]
    user_id: str


class UpdateBusinessUseCase(BaseUseCase):
    """Use case for editing a listing."""

    def __init__(
        self, business_service: BusinessService, user_service: UserService
    ) -> None:
        self.business_service = business_service
        self.user_service = user_service

    async def execute(self, request: UpdateBusinessRequest) -> BusinessResponse:
        """Execute update business flow.

        Raises:
            NotFoundError: If business or user not found
            PermissionDeniedError: If user is neither owner nor moderator
            ValidationError: If changes touch fields owners cannot edit
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        business = await self.business_service.update_business(
            caller, BusinessId(UUID(request.business_id)), request.changes
        )
        [response] = await with_ratings(self.business_service, [business])
        return response
