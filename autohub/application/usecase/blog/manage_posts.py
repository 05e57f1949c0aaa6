"""Blog authoring use cases: publish, edit and delete posts."""

from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.application.usecase.blog.read_posts import BlogPostResponse
from autohub.domain.model import BlogPostDetails
from autohub.domain.service import BlogService, UserService
from autohub.domain.value import BlogPostId


class CreatePostRequest(BaseModel):
    details: BlogPostDetails
    user_id: str  # Becomes the author


class CreatePostUseCase(BaseUseCase):
    """Use case for publishing a post."""

    def __init__(self, blog_service: BlogService, user_service: UserService) -> None:
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> BlogPostResponse:
        """Execute create post flow.

        Raises:
            NotFoundError: If user not found
            PermissionDeniedError: If user is not staff
            BusinessRuleViolationError: If the slug is taken
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        with logfire.span("create_post.execute", title=request.details.title):
            post = await self.blog_service.create_post(caller, request.details)
            return BlogPostResponse.from_post(post)


class UpdatePostRequest(BaseModel):
    """Only the fields present in changes are updated."""

    post_id: str
    changes: dict[str, Any]
    user_id: str


class UpdatePostUseCase(BaseUseCase):
    def __init__(self, blog_service: BlogService, user_service: UserService) -> None:
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: UpdatePostRequest) -> BlogPostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If post or user not found
            PermissionDeniedError: If user is neither author nor moderator
            ValidationError: If changes name unknown fields
            BusinessRuleViolationError: If the new slug is taken
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        post = await self.blog_service.update_post(
            caller, BlogPostId(UUID(request.post_id)), request.changes
        )
        return BlogPostResponse.from_post(post)


class DeletePostsRequest(BaseModel):
    post_ids: list[str]
    user_id: str


class DeletePostsResponse(BaseModel):
    deleted: int


class DeletePostsUseCase(BaseUseCase):
    """Use case for deleting posts, singly (author or moderator) or in bulk."""

    def __init__(self, blog_service: BlogService, user_service: UserService) -> None:
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: DeletePostsRequest) -> DeletePostsResponse:
        """Execute delete flow.

        Raises:
            NotFoundError: If a single requested post doesn't exist
            PermissionDeniedError: If the caller may not delete
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        post_ids = [BlogPostId(UUID(pid)) for pid in request.post_ids]
        if len(post_ids) == 1:
            await self.blog_service.delete_post(caller, post_ids[0])
            return DeletePostsResponse(deleted=1)
        deleted = await self.blog_service.delete_posts(caller, post_ids)
        return DeletePostsResponse(deleted=deleted)
