"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from autohub.domain.service import UserService
from autohub.domain.value import Caller, UserId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


async def resolve_caller(user_service: UserService, user_id: str) -> Caller:
    """Load the acting user so permission checks see their current role."""
    return await user_service.get_caller(UserId(UUID(user_id)))
