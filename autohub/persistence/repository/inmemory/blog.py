"""In-memory blog post and comment repositories for testing."""

from collections import Counter
from typing import List, Optional, Sequence

from autohub.domain.model import BlogPost, Comment, Reply
from autohub.domain.repository import BlogPostRepository, CommentRepository
from autohub.domain.value import BlogPostId, CommentId, ReplyId


def _newest_first(posts: List[BlogPost]) -> List[BlogPost]:
    return sorted(posts, key=lambda p: (p.published_on, p.created_at), reverse=True)


class InMemoryBlogPostRepository(BlogPostRepository):
    """In-memory implementation of BlogPostRepository for testing.

    Deleting a post also drops its comments when a comment repository is
    attached, mirroring the cascading foreign key.
    """

    def __init__(self, comments: Optional[CommentRepository] = None) -> None:
        self._posts: dict[BlogPostId, BlogPost] = {}
        self._comments = comments

    def _matching(
        self, category: Optional[str] = None, tag: Optional[str] = None
    ) -> List[BlogPost]:
        posts = list(self._posts.values())
        if category:
            posts = [p for p in posts if p.category == category]
        if tag:
            posts = [p for p in posts if tag in p.tags]
        return posts

    async def find_by_id(self, post_id: BlogPostId) -> Optional[BlogPost]:
        return self._posts.get(post_id)

    async def find_by_slug(self, slug: str) -> Optional[BlogPost]:
        return next((p for p in self._posts.values() if p.slug == slug), None)

    async def find_all(
        self,
        category: Optional[str] = None,
        tag: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[BlogPost]:
        posts = _newest_first(self._matching(category=category, tag=tag))
        return posts[offset : offset + limit]

    async def count(
        self, category: Optional[str] = None, tag: Optional[str] = None
    ) -> int:
        return len(self._matching(category=category, tag=tag))

    async def find_sharing_traits(self, post: BlogPost) -> List[BlogPost]:
        return _newest_first(
            [
                other
                for other in self._posts.values()
                if other.id != post.id and post.relatedness(other) > 0
            ]
        )

    async def tag_counts(self, limit: int) -> List[tuple[str, int]]:
        counts = Counter(tag for post in self._posts.values() for tag in post.tags)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:limit]

    async def increment_views(self, post_id: BlogPostId) -> Optional[BlogPost]:
        stored = self._posts.get(post_id)
        if stored is None:
            return None
        updated = stored.model_copy(update={"views": stored.views + 1})
        self._posts[post_id] = updated
        return updated

    async def save(self, post: BlogPost) -> BlogPost:
        stored = self._posts.get(post.id)
        if stored is not None:
            # Views only move through increment_views
            post = post.model_copy(update={"views": stored.views})
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: BlogPostId) -> bool:
        deleted = self._posts.pop(post_id, None) is not None
        if deleted and self._comments is not None:
            for comment in await self._comments.find_by_post(post_id):
                await self._comments.delete(comment.id)
        return deleted

    async def delete_many(self, post_ids: Sequence[BlogPostId]) -> int:
        deleted = 0
        for post_id in set(post_ids):
            if await self.delete(post_id):
                deleted += 1
        return deleted


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: BlogPostId) -> List[Comment]:
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        return sorted(comments, key=lambda c: c.created_at, reverse=True)

    async def find_all(self, limit: int = 20, offset: int = 0) -> List[Comment]:
        comments = sorted(
            self._comments.values(), key=lambda c: c.created_at, reverse=True
        )
        return comments[offset : offset + limit]

    async def count(self) -> int:
        return len(self._comments)

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def add_reply(self, comment_id: CommentId, reply: Reply) -> bool:
        stored = self._comments.get(comment_id)
        if stored is None:
            return False
        self._comments[comment_id] = stored.model_copy(
            update={"replies": [*stored.replies, reply]}
        )
        return True

    async def delete(self, comment_id: CommentId) -> bool:
        return self._comments.pop(comment_id, None) is not None

    async def delete_reply(self, comment_id: CommentId, reply_id: ReplyId) -> bool:
        stored = self._comments.get(comment_id)
        if stored is None or stored.find_reply(reply_id) is None:
            return False
        self._comments[comment_id] = stored.model_copy(
            update={"replies": [r for r in stored.replies if r.id != reply_id]}
        )
        return True
