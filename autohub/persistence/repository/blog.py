"""PostgreSQL implementation of blog post and comment repositories."""

from collections import defaultdict
from typing import Any, List, Optional, Sequence

import logfire
from sqlalchemy import Select, asc, delete, desc, func, insert, or_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from autohub.domain.model import BlogPost, Comment, Reply
from autohub.domain.repository import BlogPostRepository, CommentRepository
from autohub.domain.value import BlogPostId, CommentId, ReplyId
from autohub.persistence.mappers import (
    blog_post_to_dict,
    comment_to_dict,
    reply_to_dict,
    row_to_blog_post,
    row_to_comment,
    row_to_reply,
)
from autohub.persistence.tables import (
    blog_comment_replies_table,
    blog_comments_table,
    blog_posts_table,
)

NEWEST_FIRST = (
    desc(blog_posts_table.c.published_on),
    desc(blog_posts_table.c.created_at),
    asc(blog_posts_table.c.id),
)


def _filtered(
    stmt: Select, category: Optional[str] = None, tag: Optional[str] = None
) -> Select:
    if category:
        stmt = stmt.where(blog_posts_table.c.category == category)
    if tag:
        stmt = stmt.where(blog_posts_table.c.tags.any(tag))
    return stmt


class PostgresBlogPostRepository(BlogPostRepository):
    """PostgreSQL implementation of BlogPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self, stmt: Select) -> Optional[BlogPost]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_blog_post(row) if row else None

    async def find_by_id(self, post_id: BlogPostId) -> Optional[BlogPost]:
        """Find a post by ID."""
        return await self._first(
            select(blog_posts_table).where(blog_posts_table.c.id == post_id)
        )

    async def find_by_slug(self, slug: str) -> Optional[BlogPost]:
        """Find a post by slug."""
        return await self._first(
            select(blog_posts_table).where(blog_posts_table.c.slug == slug)
        )

    async def find_all(
        self,
        category: Optional[str] = None,
        tag: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[BlogPost]:
        """Find posts, newest publication first."""
        with logfire.span(
            "blog_post_repository.find_all",
            category=category,
            tag=tag,
            limit=limit,
            offset=offset,
        ):
            stmt = _filtered(select(blog_posts_table), category=category, tag=tag)
            stmt = stmt.order_by(*NEWEST_FIRST).limit(limit).offset(offset)
            result = await self.session.execute(stmt)
            return [row_to_blog_post(row) for row in result.mappings().all()]

    async def count(
        self, category: Optional[str] = None, tag: Optional[str] = None
    ) -> int:
        """Count posts matching the filters."""
        stmt = _filtered(
            select(func.count()).select_from(blog_posts_table),
            category=category,
            tag=tag,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_sharing_traits(self, post: BlogPost) -> List[BlogPost]:
        """Posts by the same author, in the same category, or with a common tag."""
        t = blog_posts_table.c
        shared = [t.author_id == post.author_id]
        if post.category:
            shared.append(t.category == post.category)
        if post.tags:
            shared.append(t.tags.overlap(list(post.tags)))

        result = await self.session.execute(
            select(blog_posts_table)
            .where(t.id != post.id, or_(*shared))
            .order_by(*NEWEST_FIRST)
        )
        return [row_to_blog_post(row) for row in result.mappings().all()]

    async def tag_counts(self, limit: int) -> List[tuple[str, int]]:
        """Most used tags, ties broken alphabetically."""
        tag = func.unnest(blog_posts_table.c.tags).label("tag")
        tags = select(tag).subquery()
        uses = func.count().label("uses")
        result = await self.session.execute(
            select(tags.c.tag, uses)
            .group_by(tags.c.tag)
            .order_by(desc(uses), asc(tags.c.tag))
            .limit(limit)
        )
        return [(row.tag, row.uses) for row in result.all()]

    async def increment_views(self, post_id: BlogPostId) -> Optional[BlogPost]:
        """Atomically add one to the view counter."""
        with logfire.span("blog_post_repository.increment_views", post_id=str(post_id)):
            async with self.session.begin_nested():
                result = await self.session.execute(
                    update(blog_posts_table)
                    .where(blog_posts_table.c.id == post_id)
                    .values(views=blog_posts_table.c.views + 1)
                    .returning(*blog_posts_table.c)
                )
                row = result.mappings().first()
            return row_to_blog_post(row) if row else None

    async def save(self, post: BlogPost) -> BlogPost:
        """Save a post (create or update)."""
        values = blog_post_to_dict(post)
        stmt = pg_insert(blog_posts_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[blog_posts_table.c.id],
            set_={
                k: v
                for k, v in values.items()
                if k not in ("id", "created_at", "views")
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def delete(self, post_id: BlogPostId) -> bool:
        """Delete a post; comments and replies cascade."""
        result = await self.session.execute(
            delete(blog_posts_table)
            .where(blog_posts_table.c.id == post_id)
            .returning(blog_posts_table.c.id)
        )
        return result.first() is not None

    async def delete_many(self, post_ids: Sequence[BlogPostId]) -> int:
        """Delete several posts in one statement."""
        if not post_ids:
            return 0
        result = await self.session.execute(
            delete(blog_posts_table)
            .where(blog_posts_table.c.id.in_(list(post_ids)))
            .returning(blog_posts_table.c.id)
        )
        return len(result.all())


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Replies live in their own table, so loading a page of comments costs
    two queries.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _hydrate(self, comment_rows: Sequence[Any]) -> List[Comment]:
        """Attach replies, oldest first, to comment rows."""
        if not comment_rows:
            return []

        result = await self.session.execute(
            select(blog_comment_replies_table)
            .where(
                blog_comment_replies_table.c.comment_id.in_(
                    [row["id"] for row in comment_rows]
                )
            )
            .order_by(
                asc(blog_comment_replies_table.c.created_at),
                asc(blog_comment_replies_table.c.id),
            )
        )
        replies: dict[Any, list[Reply]] = defaultdict(list)
        for row in result.mappings().all():
            replies[row["comment_id"]].append(row_to_reply(row))

        return [row_to_comment(row, replies.get(row["id"], [])) for row in comment_rows]

    async def _select(self, stmt: Select) -> List[Comment]:
        result = await self.session.execute(stmt)
        return await self._hydrate(result.mappings().all())

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment with its replies."""
        comments = await self._select(
            select(blog_comments_table).where(blog_comments_table.c.id == comment_id)
        )
        return comments[0] if comments else None

    async def find_by_post(self, post_id: BlogPostId) -> List[Comment]:
        """Comments on one post, newest first."""
        return await self._select(
            select(blog_comments_table)
            .where(blog_comments_table.c.post_id == post_id)
            .order_by(desc(blog_comments_table.c.created_at))
        )

    async def find_all(self, limit: int = 20, offset: int = 0) -> List[Comment]:
        """Every comment, newest first."""
        return await self._select(
            select(blog_comments_table)
            .order_by(desc(blog_comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(blog_comments_table)
        )
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment and any replies it carries."""
        await self.session.execute(
            insert(blog_comments_table).values(**comment_to_dict(comment))
        )
        if comment.replies:
            await self.session.execute(
                insert(blog_comment_replies_table),
                [reply_to_dict(comment.id, reply) for reply in comment.replies],
            )
        await self.session.flush()
        return comment

    async def add_reply(self, comment_id: CommentId, reply: Reply) -> bool:
        """Insert one reply row; no read-modify-write of the comment."""
        exists = await self.session.execute(
            select(blog_comments_table.c.id).where(blog_comments_table.c.id == comment_id)
        )
        if exists.first() is None:
            return False
        await self.session.execute(
            insert(blog_comment_replies_table).values(**reply_to_dict(comment_id, reply))
        )
        await self.session.flush()
        return True

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment; replies cascade."""
        result = await self.session.execute(
            delete(blog_comments_table)
            .where(blog_comments_table.c.id == comment_id)
            .returning(blog_comments_table.c.id)
        )
        return result.first() is not None

    async def delete_reply(self, comment_id: CommentId, reply_id: ReplyId) -> bool:
        """Delete one reply of a comment."""
        result = await self.session.execute(
            delete(blog_comment_replies_table)
            .where(
                blog_comment_replies_table.c.comment_id == comment_id,
                blog_comment_replies_table.c.id == reply_id,
            )
            .returning(blog_comment_replies_table.c.id)
        )
        return result.first() is not None
