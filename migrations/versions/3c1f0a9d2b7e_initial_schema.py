"""initial_schema

Create the foundational schema for AutoHub:
- Users (roles and suspension)
- Questions, answers and votes (optimistic version column on questions)
- Activities (append-only audit log)
- Businesses, reviews and ownership claims
- Site settings (one JSONB document per kind)

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ENUMS = {
    "user_role": ("Administrator", "Moderator", "Author", "User", "Business Owner"),
    "user_status": ("Active", "Suspended"),
    "votable_type": ("question", "answer"),
    "vote_direction": ("up", "down"),
    "activity_type": (
        "user",
        "business",
        "listing",
        "review",
        "data",
        "blog",
        "question",
        "category",
        "claim",
    ),
    "business_status": ("pending", "approved", "rejected", "edit-pending"),
    "review_item_type": ("business", "vehicle"),
    "claim_status": ("pending", "approved", "rejected"),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUMS[name], name=name, create_type=False)


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    if nullable:
        return sa.Column(name, sa.TIMESTAMP(timezone=True), nullable=True)
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for name, values in ENUMS.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("role", _enum("user_role"), nullable=False, server_default="User"),
        sa.Column(
            "status", _enum("user_status"), nullable=False, server_default="Active"
        ),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index(
        "idx_users_created_at", "users", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "tags", postgresql.ARRAY(sa.String(30)), nullable=False, server_default="{}"
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_name", sa.String(100), nullable=False),
        _timestamp("created_at"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("answer_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("views >= 0", name="questions_views_non_negative"),
        sa.CheckConstraint(
            "answer_count >= 0", name="questions_answer_count_non_negative"
        ),
    )
    op.create_index(
        "idx_questions_created_at", "questions", [sa.text("created_at DESC")]
    )
    op.create_index("idx_questions_upvotes", "questions", [sa.text("upvotes DESC")])
    op.create_index(
        "idx_questions_answer_count", "questions", [sa.text("answer_count DESC")]
    )
    op.create_index(
        "idx_questions_tags", "questions", ["tags"], postgresql_using="gin"
    )

    # ========================================================================
    # ANSWERS table
    # ========================================================================
    op.create_table(
        "answers",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_name", sa.String(100), nullable=False),
        _timestamp("created_at"),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("accepted", sa.Boolean(), nullable=False, server_default="false"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])
    # At most one accepted answer per question
    op.create_index(
        "uq_answers_one_accepted",
        "answers",
        ["question_id"],
        unique=True,
        postgresql_where=sa.text("accepted"),
    )

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("votable_type", _enum("votable_type"), nullable=False),
        sa.Column("votable_id", sa.UUID(), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("direction", _enum("vote_direction"), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "votable_type", "votable_id", name="uq_vote_user_votable"
        ),
    )
    op.create_index("idx_votes_question_id", "votes", ["question_id"])

    # ========================================================================
    # ACTIVITIES table
    # ========================================================================
    op.create_table(
        "activities",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("type", _enum("activity_type"), nullable=False),
        _timestamp("timestamp"),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("related_id", sa.String(100), nullable=True),
        sa.Column("read", sa.Boolean(), nullable=False, server_default="false"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_activities_timestamp", "activities", [sa.text("timestamp DESC")]
    )
    op.create_index("idx_activities_user_id", "activities", ["user_id"])
    op.create_index("idx_activities_type", "activities", ["type"])

    # ========================================================================
    # BUSINESSES table
    # ========================================================================
    op.create_table(
        "businesses",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("owner_name", sa.String(100), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("address", sa.String(500), nullable=False, server_default=""),
        sa.Column("location", sa.String(100), nullable=False, server_default=""),
        sa.Column(
            "contact", postgresql.JSONB(), nullable=False, server_default="{}"
        ),
        sa.Column(
            "socials", postgresql.JSONB(), nullable=False, server_default="{}"
        ),
        sa.Column("main_image_url", sa.Text(), nullable=True),
        sa.Column(
            "gallery_image_urls",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "services_offered",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("opening_hours", sa.String(50), nullable=True),
        sa.Column("closing_hours", sa.String(50), nullable=True),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "status",
            _enum("business_status"),
            nullable=False,
            server_default="pending",
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_businesses_status", "businesses", ["status"])
    op.create_index("idx_businesses_owner_id", "businesses", ["owner_id"])
    op.create_index(
        "idx_businesses_created_at", "businesses", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # REVIEWS table
    # ========================================================================
    op.create_table(
        "reviews",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("item_id", sa.UUID(), nullable=False),
        sa.Column("item_type", _enum("review_item_type"), nullable=False),
        sa.Column("item_title", sa.String(200), nullable=False, server_default=""),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("author_name", sa.String(100), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="reviews_rating_range"),
    )
    op.create_index("idx_reviews_item", "reviews", ["item_type", "item_id"])

    # ========================================================================
    # BUSINESS_CLAIMS table
    # ========================================================================
    op.create_table(
        "business_claims",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("business_id", sa.UUID(), nullable=False),
        sa.Column("business_name", sa.String(200), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("user_name", sa.String(100), nullable=False),
        sa.Column("user_email", sa.String(255), nullable=False),
        sa.Column("verification_details", sa.Text(), nullable=False),
        sa.Column(
            "status", _enum("claim_status"), nullable=False, server_default="pending"
        ),
        _timestamp("created_at"),
        _timestamp("reviewed_at", nullable=True),
        sa.Column("reviewed_by", sa.UUID(), nullable=True),
        sa.ForeignKeyConstraint(
            ["business_id"], ["businesses.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_business_claims_status", "business_claims", ["status"])

    # ========================================================================
    # SITE_SETTINGS table
    # ========================================================================
    op.create_table(
        "site_settings",
        sa.Column("kind", sa.String(50), nullable=False),
        sa.Column("data", postgresql.JSONB(), nullable=False, server_default="{}"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("kind"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("site_settings")
    op.drop_table("business_claims")
    op.drop_table("reviews")
    op.drop_table("businesses")
    op.drop_table("activities")
    op.drop_table("votes")
    op.drop_table("answers")
    op.drop_table("questions")
    op.drop_table("users")

    for name in reversed(list(ENUMS)):
        op.execute(f"DROP TYPE IF EXISTS {name}")

    # Extension left in place; it may be shared
