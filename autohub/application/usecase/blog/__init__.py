"""Blog use cases: posts, comments and replies."""

from .comments import (
    AddCommentRequest,
    AddCommentUseCase,
    AddReplyRequest,
    AddReplyUseCase,
    CommentResponse,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    ListAllCommentsRequest,
    ListAllCommentsResponse,
    ListAllCommentsUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    ReplyResponse,
)
from .manage_posts import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostsRequest,
    DeletePostsResponse,
    DeletePostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from .read_posts import (
    BlogPostListResponse,
    BlogPostResponse,
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
)

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "AddReplyRequest",
    "AddReplyUseCase",
    "BlogPostListResponse",
    "BlogPostResponse",
    "CommentResponse",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "DeletePostsRequest",
    "DeletePostsResponse",
    "DeletePostsUseCase",
    "DeleteReplyRequest",
    "DeleteReplyUseCase",
    "ListAllCommentsRequest",
    "ListAllCommentsResponse",
    "ListAllCommentsUseCase",
    "ListCommentsRequest",
    "ListCommentsUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "PopularTagsRequest",
    "PopularTagsUseCase",
    "ReadPostRequest",
    "ReadPostUseCase",
    "RecentPostsRequest",
    "RecentPostsUseCase",
    "RelatedPostsRequest",
    "RelatedPostsUseCase",
    "ReplyResponse",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
