"""Blog comment use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from autohub.application.usecase.base import BaseUseCase, resolve_caller
from autohub.domain.model import Comment, Reply
from autohub.domain.service import CommentService, UserService
from autohub.domain.value import BlogPostId, CommentId, ReplyId, UserId


class ReplyResponse(BaseModel):
    reply_id: str
    author_id: str
    author_name: str
    author_avatar_url: str | None
    text: str
    created_at: datetime

    @classmethod
    def from_reply(cls, reply: Reply) -> "ReplyResponse":
        return cls(
            reply_id=str(reply.id),
            author_id=str(reply.author_id),
            author_name=reply.author_name,
            author_avatar_url=reply.author_avatar_url,
            text=reply.text,
            created_at=reply.created_at,
        )


class CommentResponse(BaseModel):
    """Comment with its replies, oldest reply first."""

    comment_id: str
    post_id: str
    author_id: str
    author_name: str
    author_avatar_url: str | None
    text: str
    created_at: datetime
    replies: list[ReplyResponse]

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            author_name=comment.author_name,
            author_avatar_url=comment.author_avatar_url,
            text=comment.text,
            created_at=comment.created_at,
            replies=[ReplyResponse.from_reply(r) for r in comment.replies],
        )


class ListCommentsRequest(BaseModel):
    post_id: str


class ListCommentsUseCase(BaseUseCase):
    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> list[CommentResponse]:
        """Raises NotFoundError if the post doesn't exist."""
        comments = await self.comment_service.list_for_post(
            BlogPostId(UUID(request.post_id))
        )
        return [CommentResponse.from_comment(c) for c in comments]


class ListAllCommentsRequest(BaseModel):
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    user_id: str


class ListAllCommentsResponse(BaseModel):
    comments: list[CommentResponse]
    total: int
    limit: int
    offset: int


class ListAllCommentsUseCase(BaseUseCase):
    """Use case for the moderators' comment table."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: ListAllCommentsRequest) -> ListAllCommentsResponse:
        """Raises PermissionDeniedError unless the user is a moderator."""
        caller = await resolve_caller(self.user_service, request.user_id)
        comments, total = await self.comment_service.list_all(
            caller, limit=request.limit, offset=request.offset
        )
        return ListAllCommentsResponse(
            comments=[CommentResponse.from_comment(c) for c in comments],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )


class AddCommentRequest(BaseModel):
    post_id: str
    text: str
    user_id: str


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> CommentResponse:
        """Execute add comment flow.

        The author's current avatar is copied onto the comment.

        Raises:
            NotFoundError: If post or user not found
            PermissionDeniedError: If user is suspended
            ValidationError: If text is blank
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        comment = await self.comment_service.add_comment(
            user.as_caller(),
            BlogPostId(UUID(request.post_id)),
            request.text,
            avatar_url=user.avatar_url,
        )
        return CommentResponse.from_comment(comment)


class AddReplyRequest(BaseModel):
    comment_id: str
    text: str
    user_id: str


class AddReplyUseCase(BaseUseCase):
    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: AddReplyRequest) -> CommentResponse:
        """Execute add reply flow.

        Raises:
            NotFoundError: If comment or user not found
            PermissionDeniedError: If user is suspended
            ValidationError: If text is blank
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        comment = await self.comment_service.add_reply(
            user.as_caller(),
            CommentId(UUID(request.comment_id)),
            request.text,
            avatar_url=user.avatar_url,
        )
        return CommentResponse.from_comment(comment)


class DeleteCommentRequest(BaseModel):
    comment_id: str
    user_id: str


class DeleteCommentResponse(BaseModel):
    success: bool
    message: str


class DeleteCommentUseCase(BaseUseCase):
    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If comment or user not found
            PermissionDeniedError: If user is neither author nor moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        await self.comment_service.delete_comment(
            caller, CommentId(UUID(request.comment_id))
        )
        return DeleteCommentResponse(success=True, message="Comment deleted")


class DeleteReplyRequest(BaseModel):
    comment_id: str
    reply_id: str
    user_id: str


class DeleteReplyUseCase(BaseUseCase):
    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: DeleteReplyRequest) -> CommentResponse:
        """Execute delete reply flow.

        Raises:
            NotFoundError: If comment, reply or user not found
            PermissionDeniedError: If user is neither reply author nor moderator
        """
        caller = await resolve_caller(self.user_service, request.user_id)
        comment = await self.comment_service.delete_reply(
            caller,
            CommentId(UUID(request.comment_id)),
            ReplyId(UUID(request.reply_id)),
        )
        return CommentResponse.from_comment(comment)
