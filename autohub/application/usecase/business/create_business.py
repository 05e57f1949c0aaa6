"""Create business use case."""

import logfire
from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.business.get_business import BusinessResponse
from autohub.domain.model import BusinessDetails
from autohub.domain.service import BusinessService, UserService


class CreateBusinessRequest(BaseModel):
    """Create business request."""

    details: BusinessDetails
    user_id: str  # Becomes the owner


class CreateBusinessUseCase(BaseUseCase):
    """Use case for submitting a new listing."""

    def __init__(
        self, business_service: BusinessService, user_service: UserService
    ) -> None:
        """Initialize create business use case.

        Args:
            business_service: Business domain service
            user_service: User domain service
        """
        self.business_service = business_service
        self.user_service = user_service

    async def execute(self, request: CreateBusinessRequest) -> BusinessResponse:
        """Execute create business flow.

        Staff listings are approved at once; others wait for moderation.

        Raises:
            NotFoundError: If user not found
            PermissionDeniedError: If user is suspended
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        with logfire.span("create_business.execute", category=request.details.category):
            business = await self.business_service.create_business(caller, request.details)
            return BusinessResponse.from_business(business)
