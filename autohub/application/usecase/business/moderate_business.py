"""Moderate business use case."""

from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.business.get_business import (
    BusinessResponse,
    with_ratings,
)
from autohub.domain.service import BusinessService, UserService
from autohub.domain.value import BusinessId, BusinessStatus


class ModerateBusinessRequest(BaseModel):
    """Moderate business request."""

    business_id: str
    status: BusinessStatus | None = None
    verified: bool | None = None
    featured: bool | None = None
    user_id: str


class ModerateBusinessUseCase(BaseUseCase):
    """Use case for approving, rejecting, verifying or featuring a listing."""

    def __init__(
        self, business_service: BusinessService, user_service: UserService
    ) -> None:
        self.business_service = business_service
        self.user_service = user_service

    async def execute(self, request: ModerateBusinessRequest) -> BusinessResponse:
        """Execute moderate business flow.

        Raises:
            NotFoundError: If business or user not found
            PermissionDeniedError: If user is not a moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        business = await self.business_service.moderate_business(
            caller,
            BusinessId(UUID(request.business_id)),
            status=request.status,
            verified=request.verified,
            featured=request.featured,
        )
        [response] = await with_ratings(self.business_service, [business])
        return response
