"""Delete business use case."""

from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.domain.service import BusinessService, UserService
from autohub.domain.value import BusinessId


class DeleteBusinessRequest(BaseModel):
    """Delete business request."""

    business_id: str
    user_id: str


class DeleteBusinessResponse(BaseModel):
    """Delete business response."""

    success: bool
    message: str


class DeleteBusinessUseCase(BaseUseCase):
    """Use case for deleting a listing."""

    def __init__(
        self, business_service: BusinessService, user_service: UserService
    ) -> None:
        self.business_service = business_service
        self.user_service = user_service

    async def execute(self, request: DeleteBusinessRequest) -> DeleteBusinessResponse:
        """Execute delete business flow.

        Raises:
            NotFoundError: If business or user not found
            PermissionDeniedError: If user is neither owner nor moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        await self.business_service.delete_business(
            caller, BusinessId(UUID(request.business_id))
        )
        return DeleteBusinessResponse(success=True, message="Business deleted")
