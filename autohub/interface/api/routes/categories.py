"""Directory category routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from autohub.application.usecase.auth import GetCurrentUserUseCase
from autohub.application.usecase.category import (
    AddCategoryRequest,
    AddCategoryUseCase,
    CategoryResponse,
    DeleteCategoryRequest,
    DeleteCategoryResponse,
    DeleteCategoryUseCase,
    ListCategoriesRequest,
    ListCategoriesUseCase,
    SeedCategoriesRequest,
    SeedCategoriesResponse,
    SeedCategoriesUseCase,
    UpdateCategoryRequest,
    UpdateCategoryUseCase,
)
from autohub.interface.api.session import authenticate

router = APIRouter(prefix="/categories", tags=["categories"], route_class=DishkaRoute)


class CategoryAPIRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    image_url: str | None = None


class UpdateCategoryAPIRequest(BaseModel):
    """Fields left out are not changed."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    image_url: str | None = None


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> list[CategoryResponse]:
    return await list_categories_use_case.execute(ListCategoriesRequest())


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def add_category(
    request: CategoryAPIRequest,
    add_category_use_case: FromDishka[AddCategoryUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CategoryResponse:
    """Create a category. Moderators only; names are unique ignoring case."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await add_category_use_case.execute(
        AddCategoryRequest(
            name=request.name, image_url=request.image_url, user_id=user.user_id
        )
    )


@router.post("/seed", response_model=SeedCategoriesResponse)
async def seed_categories(
    seed_categories_use_case: FromDishka[SeedCategoriesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SeedCategoriesResponse:
    """Fill an empty category list with the defaults. Moderators only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await seed_categories_use_case.execute(
        SeedCategoriesRequest(user_id=user.user_id)
    )


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: UUID,
    request: UpdateCategoryAPIRequest,
    update_category_use_case: FromDishka[UpdateCategoryUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CategoryResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await update_category_use_case.execute(
        UpdateCategoryRequest(
            category_id=str(category_id),
            name=request.name,
            image_url=request.image_url,
            user_id=user.user_id,
        )
    )


@router.delete("/{category_id}", response_model=DeleteCategoryResponse)
async def delete_category(
    category_id: UUID,
    delete_category_use_case: FromDishka[DeleteCategoryUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCategoryResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await delete_category_use_case.execute(
        DeleteCategoryRequest(category_id=str(category_id), user_id=user.user_id)
    )
