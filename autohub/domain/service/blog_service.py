"""Blog domain service: posts, comments and replies."""

from typing import Any, Dict, List, Optional, Sequence
from uuid import uuid4

import logfire

from autohub.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from autohub.domain.model import BlogPost, BlogPostDetails, Comment, Reply
from autohub.domain.model.blog import EDITABLE_BLOG_FIELDS, slugify
from autohub.domain.model.common import utcnow
from autohub.domain.policy import (
    can_delete_comment,
    can_manage_blog_post,
    can_moderate,
    can_participate,
    is_staff,
    require,
)
from autohub.domain.repository import BlogPostRepository, CommentRepository
from autohub.domain.value import (
    ActivityType,
    BlogPostId,
    Caller,
    CommentId,
    ReplyId,
)

from .activity_service import ActivityService
from .base import Service


class BlogService(Service):
    """Domain service for blog posts.

    Posts are addressed by id for editing and by slug for reading. Slugs
    are derived from the title unless the author picks one, and stay put
    when the title is later edited.
    """

    def __init__(
        self,
        blog_post_repository: BlogPostRepository,
        activity_service: ActivityService,
    ) -> None:
        """Initialize blog service.

        Args:
            blog_post_repository: Blog post repository
            activity_service: Activity log service
        """
        self.blog_post_repository = blog_post_repository
        self.activity_service = activity_service

    async def get_post_by_id(self, post_id: BlogPostId) -> BlogPost:
        """Get post by ID.

        Raises:
            NotFoundError: If post doesn't exist
        """
        post = await self.blog_post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("BlogPost", str(post_id))
        return post

    async def read_post(self, slug: str) -> BlogPost:
        """Fetch a post by slug and count one view.

        Counting is best effort: if the increment fails the post is still
        returned.

        Raises:
            NotFoundError: If no post has this slug
        """
        with logfire.span("read_post", slug=slug):
            post = await self.blog_post_repository.find_by_slug(slug)
            if post is None:
                raise NotFoundError("BlogPost", slug)
            try:
                counted = await self.blog_post_repository.increment_views(post.id)
            except Exception as e:
                logfire.warn(
                    "View increment failed, returning post as read",
                    post_id=str(post.id),
                    error=str(e),
                )
                counted = None
            return counted or post

    async def list_posts(
        self,
        category: Optional[str] = None,
        tag: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[List[BlogPost], int]:
        """Posts newest first, optionally in one category or tag."""
        total = await self.blog_post_repository.count(category=category, tag=tag)
        posts = await self.blog_post_repository.find_all(
            category=category, tag=tag, limit=limit, offset=offset
        )
        return posts, total

    async def recent_posts(self, count: int) -> List[BlogPost]:
        return await self.blog_post_repository.find_all(limit=count)

    async def related_posts(self, post_id: BlogPostId, count: int = 3) -> List[BlogPost]:
        """Best further reading for a post.

        Ranked by relatedness (same author 3, same category 2, one per
        shared tag); ties keep newest first.

        Raises:
            NotFoundError: If post doesn't exist
        """
        post = await self.get_post_by_id(post_id)
        candidates = await self.blog_post_repository.find_sharing_traits(post)
        ranked = sorted(candidates, key=post.relatedness, reverse=True)
        return ranked[:count]

    async def popular_tags(self, count: int = 8) -> List[str]:
        """Most used tags across all posts."""
        return [tag for tag, _ in await self.blog_post_repository.tag_counts(count)]

    async def create_post(self, caller: Caller, details: BlogPostDetails) -> BlogPost:
        """Publish a post written by the caller.

        Raises:
            PermissionDeniedError: If caller is not staff
            ValidationError: If no slug can be derived from the title
            BusinessRuleViolationError: If the slug is already taken
        """
        with logfire.span("create_post", user_id=str(caller.user_id)):
            require(is_staff(caller), caller, "create", "blog post", "new")

            slug = details.slug or slugify(details.title)
            await self._check_slug_free(slug)

            post = BlogPost(
                **details.model_dump(exclude={"slug", "published_on"}),
                id=BlogPostId(uuid4()),
                slug=slug,
                published_on=details.published_on or utcnow().date(),
                author_id=caller.user_id,
                author_name=caller.name,
            )
            saved = await self.blog_post_repository.save(post)

            await self.activity_service.log(
                f"New blog post published: {saved.title}",
                ActivityType.BLOG,
                related_id=str(saved.id),
                user_id=caller.user_id,
            )
            logfire.info("Blog post created", post_id=str(saved.id), slug=slug)
            return saved

    async def update_post(
        self, caller: Caller, post_id: BlogPostId, changes: Dict[str, Any]
    ) -> BlogPost:
        """Edit a post.

        Setting slug to null derives a fresh one from the (new) title.

        Raises:
            NotFoundError: If post doesn't exist
            PermissionDeniedError: If caller is neither author nor moderator
            ValidationError: If changes include unknown fields
            BusinessRuleViolationError: If the new slug is already taken
        """
        with logfire.span("update_post", post_id=str(post_id)):
            post = await self.get_post_by_id(post_id)
            require(
                can_manage_blog_post(caller, post), caller, "edit", "blog post", str(post_id)
            )

            unknown = set(changes) - EDITABLE_BLOG_FIELDS
            if unknown:
                raise ValidationError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")

            update = {**changes, "updated_at": utcnow()}
            if "slug" in changes and not changes["slug"]:
                update["slug"] = slugify(changes.get("title") or post.title)
            if update.get("published_on") is None:
                update.pop("published_on", None)
            if update.get("slug", post.slug) != post.slug:
                await self._check_slug_free(update["slug"])

            updated = BlogPost.model_validate({**post.model_dump(), **update})
            saved = await self.blog_post_repository.save(updated)

            await self.activity_service.log(
                f"Blog post updated: {saved.title}",
                ActivityType.BLOG,
                related_id=str(post_id),
                user_id=caller.user_id,
            )
            return saved

    async def delete_post(self, caller: Caller, post_id: BlogPostId) -> None:
        """Delete a post with its comments.

        Raises:
            NotFoundError: If post doesn't exist
            PermissionDeniedError: If caller is neither author nor moderator
        """
        with logfire.span("delete_post", post_id=str(post_id)):
            post = await self.get_post_by_id(post_id)
            require(
                can_manage_blog_post(caller, post),
                caller,
                "delete",
                "blog post",
                str(post_id),
            )
            await self.blog_post_repository.delete(post_id)

            await self.activity_service.log(
                f"Blog post deleted: {post.title}",
                ActivityType.BLOG,
                related_id=str(post_id),
                user_id=caller.user_id,
            )

    async def delete_posts(self, caller: Caller, post_ids: Sequence[BlogPostId]) -> int:
        """Bulk removal for moderators; missing ids are skipped.

        Raises:
            PermissionDeniedError: If caller is not a moderator
        """
        with logfire.span("delete_posts", count=len(post_ids)):
            require(can_moderate(caller), caller, "delete", "blog posts", "*")
            deleted = await self.blog_post_repository.delete_many(post_ids)
            if deleted:
                await self.activity_service.log(
                    f"{deleted} blog posts deleted",
                    ActivityType.BLOG,
                    user_id=caller.user_id,
                )
            return deleted

    async def _check_slug_free(self, slug: str) -> None:
        if not slug:
            raise ValidationError("Title must contain letters or digits to form a slug")
        if await self.blog_post_repository.find_by_slug(slug) is not None:
            raise BusinessRuleViolationError(f"Slug already in use: {slug}")


class CommentService(Service):
    """Domain service for comments on blog posts and their replies."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        blog_post_repository: BlogPostRepository,
        activity_service: ActivityService,
    ) -> None:
        self.comment_repository = comment_repository
        self.blog_post_repository = blog_post_repository
        self.activity_service = activity_service

    async def _get_comment(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def _get_post(self, post_id: BlogPostId) -> BlogPost:
        post = await self.blog_post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("BlogPost", str(post_id))
        return post

    async def list_for_post(self, post_id: BlogPostId) -> List[Comment]:
        """Comments on a post, newest first, replies oldest first.

        Raises:
            NotFoundError: If post doesn't exist
        """
        await self._get_post(post_id)
        return await self.comment_repository.find_by_post(post_id)

    async def list_all(
        self, caller: Caller, limit: int = 20, offset: int = 0
    ) -> tuple[List[Comment], int]:
        """Every comment, for moderators.

        Raises:
            PermissionDeniedError: If caller is not a moderator
        """
        require(can_moderate(caller), caller, "list", "comments", "*")
        total = await self.comment_repository.count()
        comments = await self.comment_repository.find_all(limit=limit, offset=offset)
        return comments, total

    async def add_comment(
        self,
        caller: Caller,
        post_id: BlogPostId,
        text: str,
        avatar_url: Optional[str] = None,
    ) -> Comment:
        """Comment on a post.

        Raises:
            NotFoundError: If post doesn't exist
            PermissionDeniedError: If caller is suspended
            ValidationError: If text is blank
        """
        with logfire.span("add_comment", post_id=str(post_id)):
            require(can_participate(caller), caller, "comment", "blog post", str(post_id))
            text = text.strip()
            if not text:
                raise ValidationError("Comment text cannot be empty")
            post = await self._get_post(post_id)

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=caller.user_id,
                author_name=caller.name,
                author_avatar_url=avatar_url,
                text=text,
            )
            saved = await self.comment_repository.save(comment)

            await self.activity_service.log(
                f"New comment on {post.title}",
                ActivityType.BLOG,
                related_id=str(post_id),
                user_id=caller.user_id,
            )
            return saved

    async def add_reply(
        self,
        caller: Caller,
        comment_id: CommentId,
        text: str,
        avatar_url: Optional[str] = None,
    ) -> Comment:
        """Reply to a comment; returns the comment with all its replies.

        Raises:
            NotFoundError: If comment doesn't exist
            PermissionDeniedError: If caller is suspended
            ValidationError: If text is blank
        """
        with logfire.span("add_reply", comment_id=str(comment_id)):
            require(can_participate(caller), caller, "reply", "comment", str(comment_id))
            text = text.strip()
            if not text:
                raise ValidationError("Reply text cannot be empty")

            reply = Reply(
                id=ReplyId(uuid4()),
                author_id=caller.user_id,
                author_name=caller.name,
                author_avatar_url=avatar_url,
                text=text,
            )
            if not await self.comment_repository.add_reply(comment_id, reply):
                raise NotFoundError("Comment", str(comment_id))
            comment = await self._get_comment(comment_id)

            await self.activity_service.log(
                f"New reply to a comment by {comment.author_name}",
                ActivityType.BLOG,
                related_id=str(comment.post_id),
                user_id=caller.user_id,
            )
            return comment

    async def delete_comment(self, caller: Caller, comment_id: CommentId) -> None:
        """Delete a comment and its replies.

        Raises:
            NotFoundError: If comment doesn't exist
            PermissionDeniedError: If caller is neither author nor moderator
        """
        with logfire.span("delete_comment", comment_id=str(comment_id)):
            comment = await self._get_comment(comment_id)
            require(
                can_delete_comment(caller, comment),
                caller,
                "delete",
                "comment",
                str(comment_id),
            )
            await self.comment_repository.delete(comment_id)

            await self.activity_service.log(
                f"Comment by {comment.author_name} deleted",
                ActivityType.BLOG,
                related_id=str(comment.post_id),
                user_id=caller.user_id,
            )

    async def delete_reply(
        self, caller: Caller, comment_id: CommentId, reply_id: ReplyId
    ) -> Comment:
        """Delete one reply; returns the comment with the remaining replies.

        Raises:
            NotFoundError: If comment or reply doesn't exist
            PermissionDeniedError: If caller is neither reply author nor moderator
        """
        with logfire.span(
            "delete_reply", comment_id=str(comment_id), reply_id=str(reply_id)
        ):
            comment = await self._get_comment(comment_id)
            reply = comment.find_reply(reply_id)
            if reply is None:
                raise NotFoundError("Reply", str(reply_id))
            require(can_delete_comment(caller, reply), caller, "delete", "reply", str(reply_id))

            await self.comment_repository.delete_reply(comment_id, reply_id)
            return await self._get_comment(comment_id)
