"""Blog post and comment repository interfaces."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from autohub.domain.model import BlogPost, Comment, Reply
from autohub.domain.value import BlogPostId, CommentId, ReplyId


class BlogPostRepository(ABC):
    """Repository for blog posts.

    Lists are ordered by publication date, newest first.
    """

    @abstractmethod
    async def find_by_id(self, post_id: BlogPostId) -> Optional[BlogPost]:
        """Find a post by ID."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[BlogPost]:
        """Find a post by its URL slug."""
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[str] = None,
        tag: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[BlogPost]:
        """Find posts, optionally in one category or carrying one tag."""
        pass

    @abstractmethod
    async def count(
        self, category: Optional[str] = None, tag: Optional[str] = None
    ) -> int:
        """Count posts matching the filters."""
        pass

    @abstractmethod
    async def find_sharing_traits(self, post: BlogPost) -> List[BlogPost]:
        """Other posts with the same author or category, or a common tag.

        The post itself is never included.
        """
        pass

    @abstractmethod
    async def tag_counts(self, limit: int) -> List[tuple[str, int]]:
        """Most used tags with their post counts, most used first."""
        pass

    @abstractmethod
    async def increment_views(self, post_id: BlogPostId) -> Optional[BlogPost]:
        """Atomically add one to the view counter.

        Returns:
            The post after the increment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def save(self, post: BlogPost) -> BlogPost:
        """Save a post (create or update)."""
        pass

    @abstractmethod
    async def delete(self, post_id: BlogPostId) -> bool:
        """Delete a post together with its comments.

        Returns:
            True if a post was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_many(self, post_ids: Sequence[BlogPostId]) -> int:
        """Delete several posts; returns how many existed."""
        pass


class CommentRepository(ABC):
    """Repository for blog comments and their replies.

    Replies are appended and removed one at a time, so concurrent replies
    to the same comment never overwrite each other.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment with its replies."""
        pass

    @abstractmethod
    async def find_by_post(self, post_id: BlogPostId) -> List[Comment]:
        """Comments on one post, newest first."""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 20, offset: int = 0) -> List[Comment]:
        """Every comment, newest first."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Store a new comment and any replies it carries."""
        pass

    @abstractmethod
    async def add_reply(self, comment_id: CommentId, reply: Reply) -> bool:
        """Append a reply.

        Returns:
            False if the comment no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment with its replies."""
        pass

    @abstractmethod
    async def delete_reply(self, comment_id: CommentId, reply_id: ReplyId) -> bool:
        """Remove one reply; False if it did not exist."""
        pass
