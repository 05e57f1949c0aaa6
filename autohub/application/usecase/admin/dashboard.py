"""Dashboard use case."""

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.domain.service import DashboardService, UserService


class DashboardRequest(BaseModel):
    user_id: str


class DashboardResponse(BaseModel):
    """Counters for the admin overview."""

    users: int
    verified_businesses: int
    pending_listings: int
    reviews: int
    questions: int
    vehicles: int
    blog_posts: int


class DashboardUseCase(BaseUseCase):
    """Use case for the admin overview counters."""

    def __init__(
        self, dashboard_service: DashboardService, user_service: UserService
    ) -> None:
        self.dashboard_service = dashboard_service
        self.user_service = user_service

    async def execute(self, request: DashboardRequest) -> DashboardResponse:
        """Raises PermissionDeniedError unless the user is a moderator."""
        caller = await resolve_caller(self.user_service, request.user_id)
        counts = await self.dashboard_service.dashboard_counts(caller)
        return DashboardResponse(**counts.model_dump())
