"""Activity log use cases."""

from .list_activities import (
    ActivityResponse,
    ListActivitiesRequest,
    ListActivitiesResponse,
    ListActivitiesUseCase,
    ListUserActivitiesRequest,
    ListUserActivitiesUseCase,
)
from .manage_activities import (
    ActivityCountResponse,
    ClearActivitiesRequest,
    ClearActivitiesUseCase,
    MarkActivitiesReadRequest,
    MarkActivitiesReadUseCase,
)

__all__ = [
    "ActivityCountResponse",
    "ActivityResponse",
    "ClearActivitiesRequest",
    "ClearActivitiesUseCase",
    "ListActivitiesRequest",
    "ListActivitiesResponse",
    "ListActivitiesUseCase",
    "ListUserActivitiesRequest",
    "ListUserActivitiesUseCase",
    "MarkActivitiesReadRequest",
    "MarkActivitiesReadUseCase",
]
