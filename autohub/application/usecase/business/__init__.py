"""Business listing use cases."""

from .create_business import CreateBusinessRequest, CreateBusinessUseCase
from .delete_business import (
    DeleteBusinessRequest,
    DeleteBusinessResponse,
    DeleteBusinessUseCase,
)
from .get_business import (
    BusinessListResponse,
    BusinessResponse,
    GetBusinessRequest,
    GetBusinessUseCase,
)
from .list_businesses import (
    ListBusinessesRequest,
    ListBusinessesUseCase,
    ListFeaturedBusinessesRequest,
    ListFeaturedBusinessesUseCase,
    ListOwnedBusinessesRequest,
    ListOwnedBusinessesUseCase,
    ListPendingBusinessesRequest,
    ListPendingBusinessesUseCase,
    SearchBusinessesRequest,
    SearchBusinessesUseCase,
)
from .moderate_business import ModerateBusinessRequest, ModerateBusinessUseCase
from .update_business import UpdateBusinessRequest, UpdateBusinessUseCase

__all__ = [
    "BusinessListResponse",
    "BusinessResponse",
    "CreateBusinessRequest",
    "CreateBusinessUseCase",
    "DeleteBusinessRequest",
    "DeleteBusinessResponse",
    "DeleteBusinessUseCase",
    "GetBusinessRequest",
    "GetBusinessUseCase",
    "ListBusinessesRequest",
    "ListBusinessesUseCase",
    "ListFeaturedBusinessesRequest",
    "ListFeaturedBusinessesUseCase",
    "ListOwnedBusinessesRequest",
    "ListOwnedBusinessesUseCase",
    "ListPendingBusinessesRequest",
    "ListPendingBusinessesUseCase",
    "ModerateBusinessRequest",
    "ModerateBusinessUseCase",
    "SearchBusinessesRequest",
    "SearchBusinessesUseCase",
    "UpdateBusinessRequest",
    "UpdateBusinessUseCase",
]
