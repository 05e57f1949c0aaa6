"""SQLAlchemy table definitions for AutoHub.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def _enum(*values: str, name: str) -> postgresql.ENUM:
    """Postgres enum type; types are created by migrations, not here."""
    return postgresql.ENUM(*values, name=name, create_type=False)


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "role",
        _enum(
            "Administrator",
            "Moderator",
            "Author",
            "User",
            "Business Owner",
            name="user_role",
        ),
        nullable=False,
        server_default="User",
    ),
    Column(
        "status",
        _enum("Active", "Suspended", name="user_status"),
        nullable=False,
        server_default="Active",
    ),
    Column("verified", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_created_at", users_table.c.created_at.desc())

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=False),
    Column("tags", ARRAY(String(30)), nullable=False, server_default="{}"),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("author_name", String(100), nullable=False),  # Denormalized from users
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("views", Integer, nullable=False, server_default="0"),
    # Counters denormalized from answers/votes for sorting
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("answer_count", Integer, nullable=False, server_default="0"),
    # Optimistic concurrency token for vote/answer changes
    Column("version", Integer, nullable=False, server_default="0"),
    CheckConstraint("views >= 0", name="questions_views_non_negative"),
    CheckConstraint("answer_count >= 0", name="questions_answer_count_non_negative"),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_upvotes", questions_table.c.upvotes.desc())
Index("idx_questions_answer_count", questions_table.c.answer_count.desc())
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("body", Text, nullable=False),
    # Removed through question transactions before a user is deleted
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("author_name", String(100), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("accepted", Boolean, nullable=False, server_default="false"),
)

Index("idx_answers_question_id", answers_table.c.question_id)
# At most one accepted answer per question
Index(
    "uq_answers_one_accepted",
    answers_table.c.question_id,
    unique=True,
    postgresql_where=answers_table.c.accepted,
)

# ============================================================================
# VOTES TABLE (membership rows behind upvoted_by/downvoted_by)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default="uuid_generate_v4()"),
    # Withdrawn through question transactions before a user is deleted
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("votable_type", _enum("question", "answer", name="votable_type"), nullable=False),
    Column("votable_id", UUID(as_uuid=True), nullable=False),
    # Owning question, so answer votes go away with the question
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("direction", _enum("up", "down", name="vote_direction"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "user_id", "votable_type", "votable_id", name="uq_vote_user_votable"
    ),
)

Index("idx_votes_question_id", votes_table.c.question_id)

# ============================================================================
# ACTIVITIES TABLE
# ============================================================================
activities_table = Table(
    "activities",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("description", String(500), nullable=False),
    Column(
        "type",
        _enum(
            "user",
            "business",
            "listing",
            "review",
            "data",
            "blog",
            "question",
            "category",
            "claim",
            name="activity_type",
        ),
        nullable=False,
    ),
    Column(
        "timestamp", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # No foreign key: entries outlive the records they mention
    Column("user_id", UUID(as_uuid=True), nullable=True),
    Column("related_id", String(100), nullable=True),
    Column("read", Boolean, nullable=False, server_default="false"),
)

Index("idx_activities_timestamp", activities_table.c.timestamp.desc())
Index("idx_activities_user_id", activities_table.c.user_id)
Index("idx_activities_type", activities_table.c.type)

# ============================================================================
# BUSINESSES TABLE
# ============================================================================
businesses_table = Table(
    "businesses",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(200), nullable=False),
    Column(
        "owner_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("owner_name", String(100), nullable=False),
    Column("category", String(100), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("address", String(500), nullable=False, server_default=""),
    Column("location", String(100), nullable=False, server_default=""),
    Column("contact", JSONB, nullable=False, server_default="{}"),
    Column("socials", JSONB, nullable=False, server_default="{}"),
    Column("main_image_url", Text, nullable=True),
    Column("gallery_image_urls", ARRAY(Text), nullable=False, server_default="{}"),
    Column("services_offered", ARRAY(Text), nullable=False, server_default="{}"),
    Column("opening_hours", String(50), nullable=True),
    Column("closing_hours", String(50), nullable=True),
    Column("verified", Boolean, nullable=False, server_default="false"),
    Column("featured", Boolean, nullable=False, server_default="false"),
    Column(
        "status",
        _enum("pending", "approved", "rejected", "edit-pending", name="business_status"),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_businesses_status", businesses_table.c.status)
Index("idx_businesses_owner_id", businesses_table.c.owner_id)
Index("idx_businesses_created_at", businesses_table.c.created_at.desc())

# ============================================================================
# REVIEWS TABLE
# ============================================================================
reviews_table = Table(
    "reviews",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    # Polymorphic: a business id or an opaque vehicle id
    Column("item_id", UUID(as_uuid=True), nullable=False),
    Column(
        "item_type", _enum("business", "vehicle", name="review_item_type"), nullable=False
    ),
    Column("item_title", String(200), nullable=False, server_default=""),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_name", String(100), nullable=False),
    Column("rating", Integer, nullable=False),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("rating BETWEEN 1 AND 5", name="reviews_rating_range"),
)

Index("idx_reviews_item", reviews_table.c.item_type, reviews_table.c.item_id)

# ============================================================================
# BUSINESS CLAIMS TABLE
# ============================================================================
business_claims_table = Table(
    "business_claims",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "business_id",
        UUID(as_uuid=True),
        ForeignKey("businesses.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("business_name", String(200), nullable=False),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_name", String(100), nullable=False),
    Column("user_email", String(255), nullable=False),
    Column("verification_details", Text, nullable=False),
    Column(
        "status",
        _enum("pending", "approved", "rejected", name="claim_status"),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
    Column("reviewed_by", UUID(as_uuid=True), nullable=True),
)

Index("idx_business_claims_status", business_claims_table.c.status)

# ============================================================================
# SITE SETTINGS TABLE
# ============================================================================
site_settings_table = Table(
    "site_settings",
    metadata,
    Column("kind", String(50), primary_key=True),
    Column("data", JSONB, nullable=False, server_default="{}"),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# VEHICLES TABLE
# ============================================================================
vehicles_table = Table(
    "vehicles",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(200), nullable=False),
    Column("make", String(100), nullable=False),
    Column("model", String(100), nullable=False),
    Column("year", Integer, nullable=False),
    Column("price", Float, nullable=False, server_default="0"),
    Column("body_type", String(50), nullable=False, server_default=""),
    Column("drive_type", String(20), nullable=True),
    Column("fuel_type", String(20), nullable=True),
    Column("doors", Integer, nullable=True),
    Column("seats", Integer, nullable=True),
    Column("variants", ARRAY(Text), nullable=False, server_default="{}"),
    Column("description", Text, nullable=False, server_default=""),
    Column("performance", JSONB, nullable=False, server_default="{}"),
    Column("features", JSONB, nullable=False, server_default="{}"),
    Column("dimensions", JSONB, nullable=False, server_default="{}"),
    Column("image_urls", ARRAY(Text), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("price >= 0", name="vehicles_price_non_negative"),
)

Index("idx_vehicles_make", vehicles_table.c.make)
Index("idx_vehicles_created_at", vehicles_table.c.created_at.desc())

# ============================================================================
# BLOG POSTS TABLE
# ============================================================================
blog_posts_table = Table(
    "blog_posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("slug", String(120), nullable=False),
    Column("content", Text, nullable=False),
    Column("excerpt", String(1000), nullable=False, server_default=""),
    Column("image_url", Text, nullable=True),
    Column("category", String(100), nullable=False, server_default=""),
    Column("tags", ARRAY(String(100)), nullable=False, server_default="{}"),
    Column("read_time", Integer, nullable=False, server_default="1"),
    Column("published_on", Date, nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_name", String(100), nullable=False),
    Column("views", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("slug", name="uq_blog_posts_slug"),
    CheckConstraint("views >= 0", name="blog_posts_views_non_negative"),
)

Index(
    "idx_blog_posts_published",
    blog_posts_table.c.published_on.desc(),
    blog_posts_table.c.created_at.desc(),
)
Index("idx_blog_posts_tags", blog_posts_table.c.tags, postgresql_using="gin")

# ============================================================================
# BLOG COMMENTS TABLE
# ============================================================================
blog_comments_table = Table(
    "blog_comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_name", String(100), nullable=False),
    Column("author_avatar_url", Text, nullable=True),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_blog_comments_post_id", blog_comments_table.c.post_id)

# ============================================================================
# BLOG COMMENT REPLIES TABLE
# ============================================================================
blog_comment_replies_table = Table(
    "blog_comment_replies",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "comment_id",
        UUID(as_uuid=True),
        ForeignKey("blog_comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_name", String(100), nullable=False),
    Column("author_avatar_url", Text, nullable=True),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_blog_comment_replies_comment_id", blog_comment_replies_table.c.comment_id)

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("image_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Names are unique regardless of case
Index("uq_categories_name", func.lower(categories_table.c.name), unique=True)
