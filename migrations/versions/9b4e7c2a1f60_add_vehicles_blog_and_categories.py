"""add vehicles, blog and categories

Add the vehicle catalogue, blog posts with comments and replies, and the
directory categories.

Revision ID: 9b4e7c2a1f60
Revises: 3c1f0a9d2b7e
Create Date: 2026-10-19 15:40:03.871152

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "9b4e7c2a1f60"
down_revision: Union[str, Sequence[str], None] = "3c1f0a9d2b7e"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # VEHICLES table
    # ========================================================================
    op.create_table(
        "vehicles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("make", sa.String(100), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False, server_default="0"),
        sa.Column("body_type", sa.String(50), nullable=False, server_default=""),
        sa.Column("drive_type", sa.String(20), nullable=True),
        sa.Column("fuel_type", sa.String(20), nullable=True),
        sa.Column("doors", sa.Integer(), nullable=True),
        sa.Column("seats", sa.Integer(), nullable=True),
        sa.Column(
            "variants", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"
        ),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "performance", postgresql.JSONB(), nullable=False, server_default="{}"
        ),
        sa.Column("features", postgresql.JSONB(), nullable=False, server_default="{}"),
        sa.Column(
            "dimensions", postgresql.JSONB(), nullable=False, server_default="{}"
        ),
        sa.Column(
            "image_urls",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("price >= 0", name="vehicles_price_non_negative"),
    )
    op.create_index("idx_vehicles_make", "vehicles", ["make"])
    op.create_index(
        "idx_vehicles_created_at", "vehicles", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # BLOG_POSTS table
    # ========================================================================
    op.create_table(
        "blog_posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("slug", sa.String(120), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.String(1000), nullable=False, server_default=""),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("category", sa.String(100), nullable=False, server_default=""),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(100)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("read_time", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("published_on", sa.Date(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_name", sa.String(100), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_blog_posts_slug"),
        sa.CheckConstraint("views >= 0", name="blog_posts_views_non_negative"),
    )
    op.create_index(
        "idx_blog_posts_published",
        "blog_posts",
        [sa.text("published_on DESC"), sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_blog_posts_tags", "blog_posts", ["tags"], postgresql_using="gin"
    )

    # ========================================================================
    # BLOG_COMMENTS and BLOG_COMMENT_REPLIES tables
    # ========================================================================
    op.create_table(
        "blog_comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_name", sa.String(100), nullable=False),
        sa.Column("author_avatar_url", sa.Text(), nullable=True),
        sa.Column("text", sa.Text(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["post_id"], ["blog_posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_blog_comments_post_id", "blog_comments", ["post_id"])

    op.create_table(
        "blog_comment_replies",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_name", sa.String(100), nullable=False),
        sa.Column("author_avatar_url", sa.Text(), nullable=True),
        sa.Column("text", sa.Text(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(
            ["comment_id"], ["blog_comments.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_blog_comment_replies_comment_id", "blog_comment_replies", ["comment_id"]
    )

    # ========================================================================
    # CATEGORIES table
    # ========================================================================
    op.create_table(
        "categories",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_categories_name", "categories", [sa.text("lower(name)")], unique=True
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("categories")
    op.drop_table("blog_comment_replies")
    op.drop_table("blog_comments")
    op.drop_table("blog_posts")
    op.drop_table("vehicles")
