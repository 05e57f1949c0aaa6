"""Directory category use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.domain.model import Category
from autohub.domain.service import CategoryService, UserService
from autohub.domain.value import CategoryId


class CategoryResponse(BaseModel):
    category_id: str
    name: str
    image_url: str | None
    created_at: datetime

    @classmethod
    def from_category(cls, category: Category) -> "CategoryResponse":
        return cls(
            category_id=str(category.id),
            name=category.name,
            image_url=category.image_url,
            created_at=category.created_at,
        )


class ListCategoriesRequest(BaseModel):
    """Every category is returned; there are no filters."""


class ListCategoriesUseCase(BaseUseCase):
    """Use case for the public category list, in name order."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: ListCategoriesRequest) -> list[CategoryResponse]:
        categories = await self.category_service.list_categories()
        return [CategoryResponse.from_category(c) for c in categories]


class AddCategoryRequest(BaseModel):
    name: str
    image_url: str | None = None
    user_id: str


class AddCategoryUseCase(BaseUseCase):
    def __init__(
        self, category_service: CategoryService, user_service: UserService
    ) -> None:
        self.category_service = category_service
        self.user_service = user_service

    async def execute(self, request: AddCategoryRequest) -> CategoryResponse:
        """Execute add category flow.

        Raises:
            PermissionDeniedError: If user is not a moderator
            BusinessRuleViolationError: If the name is taken
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        category = await self.category_service.add_category(
            caller, request.name, request.image_url
        )
        return CategoryResponse.from_category(category)


class UpdateCategoryRequest(BaseModel):
    """Fields left as None are not changed."""

    category_id: str
    name: str | None = None
    image_url: str | None = None
    user_id: str


class UpdateCategoryUseCase(BaseUseCase):
    def __init__(
        self, category_service: CategoryService, user_service: UserService
    ) -> None:
        self.category_service = category_service
        self.user_service = user_service

    async def execute(self, request: UpdateCategoryRequest) -> CategoryResponse:
        """Execute update category flow.

        Raises:
            NotFoundError: If category doesn't exist
            PermissionDeniedError: If user is not a moderator
            BusinessRuleViolationError: If the new name is taken
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        category = await self.category_service.update_category(
            caller,
            CategoryId(UUID(request.category_id)),
            name=request.name,
            image_url=request.image_url,
        )
        return CategoryResponse.from_category(category)


class DeleteCategoryRequest(BaseModel):
    category_id: str
    user_id: str


class DeleteCategoryResponse(BaseModel):
    success: bool
    message: str


class DeleteCategoryUseCase(BaseUseCase):
    def __init__(
        self, category_service: CategoryService, user_service: UserService
    ) -> None:
        self.category_service = category_service
        self.user_service = user_service

    async def execute(self, request: DeleteCategoryRequest) -> DeleteCategoryResponse:
        """Raises NotFoundError or PermissionDeniedError."""
        caller = await resolve_caller(self.user_service, request.user_id)
        await self.category_service.delete_category(
            caller, CategoryId(UUID(request.category_id))
        )
        return DeleteCategoryResponse(success=True, message="Category deleted")


class SeedCategoriesRequest(BaseModel):
    user_id: str


class SeedCategoriesResponse(BaseModel):
    created: int


class SeedCategoriesUseCase(BaseUseCase):
    """Use case for filling an empty category list with the defaults."""

    def __init__(
        self, category_service: CategoryService, user_service: UserService
    ) -> None:
        self.category_service = category_service
        self.user_service = user_service

    async def execute(self, request: SeedCategoriesRequest) -> SeedCategoriesResponse:
        """Raises PermissionDeniedError unless the user is a moderator."""
        caller = await resolve_caller(self.user_service, request.user_id)
        created = await self.category_service.seed_initial_categories(caller)
        return SeedCategoriesResponse(created=created)
