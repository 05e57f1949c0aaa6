"""Blog routes: posts, comments and replies."""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from autohub.application.usecase.auth import GetCurrentUserUseCase
from autohub.application.usecase.blog import (
    AddCommentRequest,
    AddCommentUseCase,
    AddReplyRequest,
    AddReplyUseCase,
    BlogPostListResponse,
    BlogPostResponse,
    CommentResponse,
    CreatePostRequest,
    CreatePostUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    DeletePostsRequest,
    DeletePostsResponse,
    DeletePostsUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    ListAllCommentsRequest,
    ListAllCommentsResponse,
    ListAllCommentsUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PopularTagsRequest,
    PopularTagsUseCase,
    ReadPostRequest,
    ReadPostUseCase,
    RecentPostsRequest,
    RecentPostsUseCase,
    RelatedPostsRequest,
    RelatedPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from autohub.config import PaginationSettings
from autohub.domain.model import BlogPostDetails
from autohub.interface.api.session import authenticate, page_limit

router = APIRouter(prefix="/blog", tags=["blog"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    text: str = Field(min_length=1, max_length=5000)


class BulkDeleteAPIRequest(BaseModel):
    post_ids: list[UUID] = Field(min_length=1, max_length=500)


@router.get("", response_model=BlogPostListResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    pagination: FromDishka[PaginationSettings],
    category: str | None = Query(default=None),
    tag: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> BlogPostListResponse:
    """Posts, newest publication first."""
    return await list_posts_use_case.execute(
        ListPostsRequest(
            category=category,
            tag=tag,
            limit=page_limit(limit, pagination),
            offset=offset,
        )
    )


@router.get("/recent", response_model=list[BlogPostResponse])
async def recent_posts(
    recent_posts_use_case: FromDishka[RecentPostsUseCase],
    count: int = Query(default=3, ge=1, le=50),
) -> list[BlogPostResponse]:
    return await recent_posts_use_case.execute(RecentPostsRequest(count=count))


@router.get("/tags", response_model=list[str])
async def popular_tags(
    popular_tags_use_case: FromDishka[PopularTagsUseCase],
    count: int = Query(default=8, ge=1, le=50),
) -> list[str]:
    """Most used tags, most used first."""
    return await popular_tags_use_case.execute(PopularTagsRequest(count=count))


@router.get("/comments", response_model=ListAllCommentsResponse)
async def list_all_comments(
    list_all_comments_use_case: FromDishka[ListAllCommentsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    pagination: FromDishka[PaginationSettings],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListAllCommentsResponse:
    """Every comment, newest first. Moderators only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await list_all_comments_use_case.execute(
        ListAllCommentsRequest(
            limit=page_limit(limit, pagination), offset=offset, user_id=user.user_id
        )
    )


@router.get("/slug/{slug}", response_model=BlogPostResponse)
async def read_post(
    slug: str,
    read_post_use_case: FromDishka[ReadPostUseCase],
) -> BlogPostResponse:
    """Open a post by its slug. Counts one view."""
    return await read_post_use_case.execute(ReadPostRequest(slug=slug))


@router.post("", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: BlogPostDetails,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> BlogPostResponse:
    """Publish a post. Staff only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await create_post_use_case.execute(
        CreatePostRequest(details=request, user_id=user.user_id)
    )


@router.post("/bulk-delete", response_model=DeletePostsResponse)
async def delete_posts(
    request: BulkDeleteAPIRequest,
    delete_posts_use_case: FromDishka[DeletePostsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeletePostsResponse:
    """Remove several posts at once. Moderators only."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await delete_posts_use_case.execute(
        DeletePostsRequest(
            post_ids=[str(pid) for pid in request.post_ids], user_id=user.user_id
        )
    )


@router.get("/{post_id}/related", response_model=list[BlogPostResponse])
async def related_posts(
    post_id: UUID,
    related_posts_use_case: FromDishka[RelatedPostsUseCase],
    count: int = Query(default=3, ge=1, le=20),
) -> list[BlogPostResponse]:
    return await related_posts_use_case.execute(
        RelatedPostsRequest(post_id=str(post_id), count=count)
    )


@router.patch("/{post_id}", response_model=BlogPostResponse)
async def update_post(
    post_id: UUID,
    request: dict[str, Any],
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> BlogPostResponse:
    """Edit a post. Its author or a moderator."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await update_post_use_case.execute(
        UpdatePostRequest(post_id=str(post_id), changes=request, user_id=user.user_id)
    )


@router.delete("/{post_id}", response_model=DeletePostsResponse)
async def delete_post(
    post_id: UUID,
    delete_posts_use_case: FromDishka[DeletePostsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeletePostsResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await delete_posts_use_case.execute(
        DeletePostsRequest(post_ids=[str(post_id)], user_id=user.user_id)
    )


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(
    post_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> list[CommentResponse]:
    """Comments on a post, newest first."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(post_id=str(post_id))
    )


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: UUID,
    request: CommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await add_comment_use_case.execute(
        AddCommentRequest(post_id=str(post_id), text=request.text, user_id=user.user_id)
    )


@router.post(
    "/comments/{comment_id}/replies",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    comment_id: UUID,
    request: CommentAPIRequest,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Reply to a comment; returns the comment with every reply."""
    user = await authenticate(auth_token, get_current_user_use_case)
    return await add_reply_use_case.execute(
        AddReplyRequest(
            comment_id=str(comment_id), text=request.text, user_id=user.user_id
        )
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), user_id=user.user_id)
    )


@router.delete(
    "/comments/{comment_id}/replies/{reply_id}", response_model=CommentResponse
)
async def delete_reply(
    comment_id: UUID,
    reply_id: UUID,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    user = await authenticate(auth_token, get_current_user_use_case)
    return await delete_reply_use_case.execute(
        DeleteReplyRequest(
            comment_id=str(comment_id), reply_id=str(reply_id), user_id=user.user_id
        )
    )
