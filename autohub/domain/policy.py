"""Access-control predicates.

Pure functions of a caller and a target record. Services call ``require``
with one of these before writing anything. Every predicate is false for a
suspended caller.
"""

import logfire

from autohub.domain.error import PermissionDeniedError
from autohub.domain.model import (
    Answer,
    BlogPost,
    Business,
    Comment,
    Question,
    Reply,
    Review,
)
from autohub.domain.value import Caller, UserId, UserRole, UserStatus

# Roles allowed to curate forum content (edit questions, accept answers)
STAFF_ROLES = frozenset({UserRole.ADMINISTRATOR, UserRole.MODERATOR, UserRole.AUTHOR})

# Roles allowed to remove other people's content and run moderation queues
MODERATOR_ROLES = frozenset({UserRole.ADMINISTRATOR, UserRole.MODERATOR})


def is_active(caller: Caller) -> bool:
    return caller.status == UserStatus.ACTIVE


def is_staff(caller: Caller) -> bool:
    return is_active(caller) and caller.role in STAFF_ROLES


def is_moderator(caller: Caller) -> bool:
    return is_active(caller) and caller.role in MODERATOR_ROLES


def can_participate(caller: Caller) -> bool:
    """Ask, answer, vote, review, claim."""
    return is_active(caller)


def can_edit_question(caller: Caller, question: Question) -> bool:
    return is_active(caller) and (
        question.author_id == caller.user_id or caller.role in STAFF_ROLES
    )


def can_delete_question(caller: Caller, question: Question) -> bool:
    return is_active(caller) and (
        question.author_id == caller.user_id or caller.role in MODERATOR_ROLES
    )


def can_accept_answer(caller: Caller, question: Question) -> bool:
    return is_active(caller) and (
        question.author_id == caller.user_id or caller.role in STAFF_ROLES
    )


def can_delete_answer(caller: Caller, answer: Answer) -> bool:
    return is_active(caller) and (
        answer.author_id == caller.user_id or caller.role in MODERATOR_ROLES
    )


def can_manage_business(caller: Caller, business: Business) -> bool:
    return is_active(caller) and (
        business.owner_id == caller.user_id or caller.role in MODERATOR_ROLES
    )


def can_manage_blog_post(caller: Caller, post: BlogPost) -> bool:
    return is_active(caller) and (
        post.author_id == caller.user_id or caller.role in MODERATOR_ROLES
    )


def can_delete_comment(caller: Caller, comment: Comment | Reply) -> bool:
    """Comments and replies alike: their author, or a moderator."""
    return is_active(caller) and (
        comment.author_id == caller.user_id or caller.role in MODERATOR_ROLES
    )


def can_moderate(caller: Caller) -> bool:
    """Listing approval, claims, the activity log and dashboards."""
    return is_moderator(caller)


def can_delete_review(caller: Caller, review: Review) -> bool:
    return is_active(caller) and (
        review.user_id == caller.user_id or caller.role in MODERATOR_ROLES
    )


def can_administer(caller: Caller) -> bool:
    """User management and site settings."""
    return is_active(caller) and caller.role == UserRole.ADMINISTRATOR


def can_view_user_data(caller: Caller, user_id: UserId) -> bool:
    """A user's own activity, or anyone's for moderators."""
    return is_active(caller) and (caller.user_id == user_id or is_moderator(caller))


def require(
    allowed: bool, caller: Caller, action: str, resource: str, resource_id: str
) -> None:
    """Raise PermissionDeniedError unless ``allowed``.

    Raises:
        PermissionDeniedError: If the predicate was false
    """
    if not allowed:
        logfire.warn(
            "Permission denied",
            user_id=str(caller.user_id),
            role=caller.role.value,
            action=action,
            resource=resource,
            resource_id=resource_id,
        )
        raise PermissionDeniedError(action, resource, resource_id, str(caller.user_id))
