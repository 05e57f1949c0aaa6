"""Blog reading use cases.

The response models here are shared by every blog post use case.
"""

from datetime import date, datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from autohub.application.usecase.base import BaseUseCase
from autohub.domain.model import BlogPost
from autohub.domain.service import BlogService
from autohub.domain.value import BlogPostId


class BlogPostResponse(BaseModel):
    """Blog post as shown to readers."""

    post_id: str
    title: str
    slug: str
    content: str
    excerpt: str
    image_url: str | None
    category: str
    tags: list[str]
    read_time: int
    published_on: date
    author_id: str
    author_name: str
    views: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: BlogPost) -> "BlogPostResponse":
        return cls(
            **post.model_dump(exclude={"id", "author_id"}),
            post_id=str(post.id),
            author_id=str(post.author_id),
        )


class BlogPostListResponse(BaseModel):
    posts: list[BlogPostResponse]
    total: int
    limit: int
    offset: int


class ReadPostRequest(BaseModel):
    slug: str


class ReadPostUseCase(BaseUseCase):
    """Use case for opening a post by slug; counts one view."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: ReadPostRequest) -> BlogPostResponse:
        """Raises NotFoundError if no post has the slug."""
        post = await self.blog_service.read_post(request.slug)
        return BlogPostResponse.from_post(post)


class ListPostsRequest(BaseModel):
    category: str | None = None
    tag: str | None = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListPostsUseCase(BaseUseCase):
    """Use case for the blog index."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: ListPostsRequest) -> BlogPostListResponse:
        with logfire.span(
            "list_posts.execute",
            category=request.category,
            tag=request.tag,
            limit=request.limit,
            offset=request.offset,
        ):
            posts, total = await self.blog_service.list_posts(
                category=request.category,
                tag=request.tag,
                limit=request.limit,
                offset=request.offset,
            )
            return BlogPostListResponse(
                posts=[BlogPostResponse.from_post(p) for p in posts],
                total=total,
                limit=request.limit,
                offset=request.offset,
            )


class RecentPostsRequest(BaseModel):
    count: int = Field(default=3, ge=1, le=50)


class RecentPostsUseCase(BaseUseCase):
    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: RecentPostsRequest) -> list[BlogPostResponse]:
        posts = await self.blog_service.recent_posts(request.count)
        return [BlogPostResponse.from_post(p) for p in posts]


class RelatedPostsRequest(BaseModel):
    post_id: str
    count: int = Field(default=3, ge=1, le=20)


class RelatedPostsUseCase(BaseUseCase):
    """Use case for the further-reading list under a post."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: RelatedPostsRequest) -> list[BlogPostResponse]:
        """Raises NotFoundError if the post doesn't exist."""
        posts = await self.blog_service.related_posts(
            BlogPostId(UUID(request.post_id)), request.count
        )
        return [BlogPostResponse.from_post(p) for p in posts]


class PopularTagsRequest(BaseModel):
    count: int = Field(default=8, ge=1, le=50)


class PopularTagsUseCase(BaseUseCase):
    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: PopularTagsRequest) -> list[str]:
        return await self.blog_service.popular_tags(request.count)
