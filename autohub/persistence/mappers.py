"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List
from uuid import UUID

from autohub.domain.model import (
    Activity,
    Answer,
    BlogPost,
    Business,
    BusinessClaim,
    Category,
    Comment,
    Question,
    Reply,
    Review,
    User,
    Vehicle,
    VehicleDimensions,
    VehicleFeatures,
    VehiclePerformance,
)
from autohub.domain.value import (
    ActivityId,
    ActivityType,
    AnswerId,
    BlogPostId,
    BusinessId,
    BusinessStatus,
    CategoryId,
    ClaimId,
    ClaimStatus,
    CommentId,
    DriveType,
    FuelType,
    QuestionId,
    ReplyId,
    ReviewId,
    ReviewItemType,
    TagName,
    UserId,
    UserRole,
    UserStatus,
    VehicleId,
    VotableType,
    VoteDirection,
)


def _uuid(value: Any) -> UUID:
    return value if isinstance(value, UUID) else UUID(str(value))


# ----------------------------------------------------------------------------
# Users
# ----------------------------------------------------------------------------


def row_to_user(row: Mapping[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row mapping

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        avatar_url=row.get("avatar_url"),
        role=UserRole(row["role"]),
        status=UserStatus(row["status"]),
        verified=row["verified"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "avatar_url": user.avatar_url,
        "role": user.role.value,
        "status": user.status.value,
        "verified": user.verified,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


# ----------------------------------------------------------------------------
# Questions, answers and vote memberships
# ----------------------------------------------------------------------------


def split_votes(
    vote_rows: Iterable[Mapping[str, Any]],
) -> Dict[UUID, Dict[VoteDirection, List[UserId]]]:
    """Group vote rows into per-votable membership lists.

    Returns:
        Mapping votable id -> direction -> voter ids (oldest vote first)
    """
    memberships: Dict[UUID, Dict[VoteDirection, List[UserId]]] = {}
    for row in vote_rows:
        per_votable = memberships.setdefault(
            _uuid(row["votable_id"]),
            {VoteDirection.UP: [], VoteDirection.DOWN: []},
        )
        per_votable[VoteDirection(row["direction"])].append(UserId(_uuid(row["user_id"])))
    return memberships


def row_to_answer(
    row: Mapping[str, Any],
    votes: Dict[VoteDirection, List[UserId]] | None = None,
) -> Answer:
    """Convert database row plus vote memberships to Answer."""
    votes = votes or {}
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row["author_name"],
        created_at=row["created_at"],
        accepted=row["accepted"],
        upvoted_by=votes.get(VoteDirection.UP, []),
        downvoted_by=votes.get(VoteDirection.DOWN, []),
    )


def row_to_question(
    row: Mapping[str, Any],
    answers: List[Answer],
    votes: Dict[VoteDirection, List[UserId]] | None = None,
) -> Question:
    """Convert database row, loaded answers and vote memberships to Question.

    Args:
        row: Question row mapping
        answers: The question's answers, oldest first
        votes: Vote memberships of the question itself

    Returns:
        Question domain model
    """
    votes = votes or {}
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        body=row["body"],
        tags=[TagName(tag) for tag in row["tags"] or []],
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row["author_name"],
        created_at=row["created_at"],
        views=row["views"],
        answers=answers,
        version=row["version"],
        upvoted_by=votes.get(VoteDirection.UP, []),
        downvoted_by=votes.get(VoteDirection.DOWN, []),
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to a questions-table dict."""
    return {
        "id": question.id,
        "title": question.title,
        "body": question.body,
        "tags": [tag.root for tag in question.tags],
        "author_id": question.author_id,
        "author_name": question.author_name,
        "created_at": question.created_at,
        "views": question.views,
        "upvotes": question.upvotes,
        "downvotes": question.downvotes,
        "answer_count": question.answer_count,
        "version": question.version,
    }


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to an answers-table dict."""
    return {
        "id": answer.id,
        "question_id": answer.question_id,
        "body": answer.body,
        "author_id": answer.author_id,
        "author_name": answer.author_name,
        "created_at": answer.created_at,
        "upvotes": answer.upvotes,
        "downvotes": answer.downvotes,
        "accepted": answer.accepted,
    }


def question_vote_rows(question: Question) -> List[Dict[str, Any]]:
    """Vote membership rows for a question and all its answers."""
    rows: List[Dict[str, Any]] = []

    def add(votable_type: VotableType, votable_id: UUID, voters, direction) -> None:
        for user_id in voters:
            rows.append(
                {
                    "user_id": user_id,
                    "votable_type": votable_type.value,
                    "votable_id": votable_id,
                    "question_id": question.id,
                    "direction": direction.value,
                }
            )

    add(VotableType.QUESTION, question.id, question.upvoted_by, VoteDirection.UP)
    add(VotableType.QUESTION, question.id, question.downvoted_by, VoteDirection.DOWN)
    for answer in question.answers:
        add(VotableType.ANSWER, answer.id, answer.upvoted_by, VoteDirection.UP)
        add(VotableType.ANSWER, answer.id, answer.downvoted_by, VoteDirection.DOWN)
    return rows


# ----------------------------------------------------------------------------
# Activity log
# ----------------------------------------------------------------------------


def row_to_activity(row: Mapping[str, Any]) -> Activity:
    """Convert database row to Activity domain model."""
    user_id = row.get("user_id")
    return Activity(
        id=ActivityId(_uuid(row["id"])),
        description=row["description"],
        type=ActivityType(row["type"]),
        timestamp=row["timestamp"],
        user_id=UserId(_uuid(user_id)) if user_id else None,
        related_id=row.get("related_id"),
        read=row["read"],
    )


def activity_to_dict(activity: Activity) -> Dict[str, Any]:
    """Convert Activity domain model to database dict."""
    return {
        "id": activity.id,
        "description": activity.description,
        "type": activity.type.value,
        "timestamp": activity.timestamp,
        "user_id": activity.user_id,
        "related_id": activity.related_id,
        "read": activity.read,
    }


# ----------------------------------------------------------------------------
# Businesses, reviews and claims
# ----------------------------------------------------------------------------


def row_to_business(row: Mapping[str, Any]) -> Business:
    """Convert database row to Business domain model."""
    return Business(
        id=BusinessId(_uuid(row["id"])),
        title=row["title"],
        owner_id=UserId(_uuid(row["owner_id"])),
        owner_name=row["owner_name"],
        category=row["category"],
        description=row["description"],
        address=row["address"],
        location=row["location"],
        contact=row["contact"] or {},
        socials=row["socials"] or {},
        main_image_url=row.get("main_image_url"),
        gallery_image_urls=row["gallery_image_urls"] or [],
        services_offered=row["services_offered"] or [],
        opening_hours=row.get("opening_hours"),
        closing_hours=row.get("closing_hours"),
        verified=row["verified"],
        featured=row["featured"],
        status=BusinessStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def business_to_dict(business: Business) -> Dict[str, Any]:
    """Convert Business domain model to database dict.

    Nested value objects are stored as JSONB documents.
    """
    data = business.model_dump()
    data["contact"] = business.contact.model_dump(mode="json")
    data["socials"] = business.socials.model_dump(mode="json")
    data["status"] = business.status.value
    return data


def row_to_review(row: Mapping[str, Any]) -> Review:
    """Convert database row to Review domain model."""
    return Review(
        id=ReviewId(_uuid(row["id"])),
        item_id=_uuid(row["item_id"]),
        item_type=ReviewItemType(row["item_type"]),
        item_title=row["item_title"],
        user_id=UserId(_uuid(row["user_id"])),
        author_name=row["author_name"],
        rating=row["rating"],
        text=row["text"],
        created_at=row["created_at"],
    )


def review_to_dict(review: Review) -> Dict[str, Any]:
    """Convert Review domain model to database dict."""
    data = review.model_dump()
    data["item_type"] = review.item_type.value
    return data


def row_to_claim(row: Mapping[str, Any]) -> BusinessClaim:
    """Convert database row to BusinessClaim domain model."""
    reviewed_by = row.get("reviewed_by")
    return BusinessClaim(
        id=ClaimId(_uuid(row["id"])),
        business_id=BusinessId(_uuid(row["business_id"])),
        business_name=row["business_name"],
        user_id=UserId(_uuid(row["user_id"])),
        user_name=row["user_name"],
        user_email=row["user_email"],
        verification_details=row["verification_details"],
        status=ClaimStatus(row["status"]),
        created_at=row["created_at"],
        reviewed_at=row.get("reviewed_at"),
        reviewed_by=UserId(_uuid(reviewed_by)) if reviewed_by else None,
    )


def claim_to_dict(claim: BusinessClaim) -> Dict[str, Any]:
    """Convert BusinessClaim domain model to database dict."""
    data = claim.model_dump()
    data["status"] = claim.status.value
    return data


# ----------------------------------------------------------------------------
# Vehicles
# ----------------------------------------------------------------------------


def row_to_vehicle(row: Mapping[str, Any]) -> Vehicle:
    """Convert database row to Vehicle domain model."""
    drive_type = row.get("drive_type")
    fuel_type = row.get("fuel_type")
    return Vehicle(
        id=VehicleId(_uuid(row["id"])),
        name=row["name"],
        make=row["make"],
        model=row["model"],
        year=row["year"],
        price=row["price"],
        body_type=row["body_type"],
        drive_type=DriveType(drive_type) if drive_type else None,
        fuel_type=FuelType(fuel_type) if fuel_type else None,
        doors=row.get("doors"),
        seats=row.get("seats"),
        variants=row["variants"] or [],
        description=row["description"],
        performance=VehiclePerformance.model_validate(row["performance"] or {}),
        features=VehicleFeatures.model_validate(row["features"] or {}),
        dimensions=VehicleDimensions.model_validate(row["dimensions"] or {}),
        image_urls=row["image_urls"] or [],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vehicle_to_dict(vehicle: Vehicle) -> Dict[str, Any]:
    """Convert Vehicle domain model to database dict.

    Specification groups are stored as JSONB documents.
    """
    data = vehicle.model_dump()
    data["drive_type"] = vehicle.drive_type.value if vehicle.drive_type else None
    data["fuel_type"] = vehicle.fuel_type.value if vehicle.fuel_type else None
    data["performance"] = vehicle.performance.model_dump(mode="json")
    data["features"] = vehicle.features.model_dump(mode="json")
    data["dimensions"] = vehicle.dimensions.model_dump(mode="json")
    return data


# ----------------------------------------------------------------------------
# Blog posts, comments and replies
# ----------------------------------------------------------------------------


def row_to_blog_post(row: Mapping[str, Any]) -> BlogPost:
    """Convert database row to BlogPost domain model."""
    return BlogPost(
        id=BlogPostId(_uuid(row["id"])),
        title=row["title"],
        slug=row["slug"],
        content=row["content"],
        excerpt=row["excerpt"],
        image_url=row.get("image_url"),
        category=row["category"],
        tags=row["tags"] or [],
        read_time=row["read_time"],
        published_on=row["published_on"],
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row["author_name"],
        views=row["views"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def blog_post_to_dict(post: BlogPost) -> Dict[str, Any]:
    """Convert BlogPost domain model to database dict."""
    return post.model_dump()


def row_to_reply(row: Mapping[str, Any]) -> Reply:
    """Convert database row to Reply domain model."""
    return Reply(
        id=ReplyId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row["author_name"],
        author_avatar_url=row.get("author_avatar_url"),
        text=row["text"],
        created_at=row["created_at"],
    )


def reply_to_dict(comment_id: CommentId, reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict under its comment."""
    return {**reply.model_dump(), "comment_id": comment_id}


def row_to_comment(row: Mapping[str, Any], replies: List[Reply]) -> Comment:
    """Convert database row plus its replies to Comment."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=BlogPostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row["author_name"],
        author_avatar_url=row.get("author_avatar_url"),
        text=row["text"],
        created_at=row["created_at"],
        replies=replies,
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict (replies excluded)."""
    return comment.model_dump(exclude={"replies"})


# ----------------------------------------------------------------------------
# Categories
# ----------------------------------------------------------------------------


def row_to_category(row: Mapping[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(
        id=CategoryId(_uuid(row["id"])),
        name=row["name"],
        image_url=row.get("image_url"),
        created_at=row["created_at"],
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    return category.model_dump()
