"""Blog posts, their comments and replies."""

import re
from datetime import date, datetime
from typing import Optional

from pydantic import Field, field_validator

from autohub.domain.model.common import DomainModel, utcnow
from autohub.domain.value import BlogPostId, CommentId, ReplyId, UserId
from autohub.domain.value.common import ValueObject

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(text: str, max_length: int = 120) -> str:
    """URL slug from a title ("Winter Tyres: A Guide" -> "winter-tyres-a-guide")."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.strip().lower()).strip("-")
    return slug[:max_length].rstrip("-")


class BlogPostDetails(ValueObject):
    """Fields an author writes; the slug is derived from the title if omitted."""

    title: str = Field(min_length=1, max_length=300)
    slug: Optional[str] = Field(default=None, max_length=120)
    content: str = Field(min_length=1, max_length=100000)
    excerpt: str = Field(default="", max_length=1000)
    image_url: Optional[str] = None
    category: str = Field(default="", max_length=100)
    tags: list[str] = Field(default_factory=list, max_length=20)
    read_time: int = Field(default=1, ge=1, le=600)  # Minutes
    published_on: Optional[date] = None  # Defaults to the creation day

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not SLUG_PATTERN.match(v):
            raise ValueError("Slug must be lowercase words joined by hyphens")
        return v


EDITABLE_BLOG_FIELDS = frozenset(BlogPostDetails.model_fields)


class BlogPost(DomainModel):
    """A blog article.

    Business rules:
    - Slugs are unique; posts are read by slug
    - Every read by slug counts one view
    - Authors edit and delete their own posts; moderators any post
    """

    id: BlogPostId
    title: str = Field(min_length=1, max_length=300)
    slug: str = Field(min_length=1, max_length=120, pattern=SLUG_PATTERN.pattern)
    content: str = Field(min_length=1, max_length=100000)
    excerpt: str = Field(default="", max_length=1000)
    image_url: Optional[str] = None
    category: str = Field(default="", max_length=100)
    tags: list[str] = Field(default_factory=list, max_length=20)
    read_time: int = Field(default=1, ge=1, le=600)
    published_on: date
    author_id: UserId
    author_name: str = Field(min_length=1, max_length=100)
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def relatedness(self, other: "BlogPost") -> int:
        """Score of another post as further reading for this one.

        Same author scores 3, same category 2, and each shared tag 1.
        """
        score = 0
        if other.author_id == self.author_id:
            score += 3
        if self.category and other.category == self.category:
            score += 2
        score += len(set(self.tags) & set(other.tags))
        return score


class Reply(DomainModel):
    """A reply nested under a comment."""

    id: ReplyId
    author_id: UserId
    author_name: str = Field(min_length=1, max_length=100)
    author_avatar_url: Optional[str] = None
    text: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=utcnow)


class Comment(DomainModel):
    """A top-level comment on a blog post, with its replies oldest first."""

    id: CommentId
    post_id: BlogPostId
    author_id: UserId
    author_name: str = Field(min_length=1, max_length=100)
    author_avatar_url: Optional[str] = None
    text: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=utcnow)
    replies: list[Reply] = Field(default_factory=list)

    def find_reply(self, reply_id: ReplyId) -> Optional[Reply]:
        for reply in self.replies:
            if reply.id == reply_id:
                return reply
        return None
