"""Test configuration and shared builders."""

from datetime import date
from uuid import uuid4

from autohub.domain.model import BlogPost, Business, Question, User, Vehicle
from autohub.domain.value import (
    BlogPostId,
    BusinessId,
    BusinessStatus,
    QuestionId,
    UserId,
    UserRole,
    UserStatus,
    VehicleId,
)


def make_user(
    role: UserRole = UserRole.USER,
    name: str = "Test User",
    status: UserStatus = UserStatus.ACTIVE,
    email: str | None = None,
) -> User:
    """Build a user with a unique id and email."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        name=name,
        email=email or f"{str(user_id)[:8]}@autohub.test",
        role=role,
        status=status,
    )


def make_question(author: User, title: str = "Why does my engine knock?") -> Question:
    """Build a question with no answers, votes or views."""
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        body="It knocks under load, mostly uphill.",
        author_id=author.id,
        author_name=author.name,
    )


def make_business(
    owner: User,
    title: str = "Bob's Garage",
    status: BusinessStatus = BusinessStatus.APPROVED,
    category: str = "Repair",
    location: str = "Ireland",
    **overrides,
) -> Business:
    """Build a listing owned by ``owner``."""
    return Business(
        id=BusinessId(uuid4()),
        title=title,
        owner_id=owner.id,
        owner_name=owner.name,
        category=category,
        location=location,
        status=status,
        **overrides,
    )


def make_vehicle(
    name: str = "Mazda MX-5",
    make: str = "Mazda",
    model: str = "MX-5",
    year: int = 2022,
    body_type: str = "Convertible",
    **overrides,
) -> Vehicle:
    """Build a catalogue vehicle."""
    return Vehicle(
        id=VehicleId(uuid4()),
        name=name,
        make=make,
        model=model,
        year=year,
        body_type=body_type,
        **overrides,
    )


def make_blog_post(
    author: User,
    title: str = "Winter tyre guide",
    slug: str | None = None,
    category: str = "Guides",
    tags: list[str] | None = None,
    **overrides,
) -> BlogPost:
    """Build a published blog post by ``author``."""
    post_id = BlogPostId(uuid4())
    return BlogPost(
        id=post_id,
        title=title,
        slug=slug or f"post-{str(post_id)[:8]}",
        content="Check the tread depth before the first frost.",
        category=category,
        tags=tags if tags is not None else ["tyres"],
        published_on=date(2026, 1, 15),
        author_id=author.id,
        author_name=author.name,
        **overrides,
    )
