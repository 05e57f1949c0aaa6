"""Directory category use cases."""

from .categories import (
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

__all__ = [
    "AddCategoryRequest",
    "AddCategoryUseCase",
    "CategoryResponse",
    "DeleteCategoryRequest",
    "DeleteCategoryResponse",
    "DeleteCategoryUseCase",
    "ListCategoriesRequest",
    "ListCategoriesUseCase",
    "SeedCategoriesRequest",
    "SeedCategoriesResponse",
    "SeedCategoriesUseCase",
    "UpdateCategoryRequest",
    "UpdateCategoryUseCase",
]
