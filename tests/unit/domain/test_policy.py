"""Unit tests for access-control predicates."""

import pytest

from autohub.domain import policy
from autohub.domain.error import PermissionDeniedError
from autohub.domain.value import UserRole, UserStatus
from tests.conftest import make_business, make_question, make_user

ALL_ROLES = list(UserRole)


class TestRolePredicates:
    """Permission matrix for role-only predicates."""

    @pytest.mark.parametrize(
        "role,expected",
        [
            (UserRole.ADMINISTRATOR, True),
            (UserRole.MODERATOR, True),
            (UserRole.AUTHOR, False),
            (UserRole.USER, False),
            (UserRole.BUSINESS_OWNER, False),
        ],
    )
    def test_can_moderate(self, role, expected):
        assert policy.can_moderate(make_user(role=role).as_caller()) is expected

    @pytest.mark.parametrize(
        "role,expected",
        [
            (UserRole.ADMINISTRATOR, True),
            (UserRole.MODERATOR, False),
            (UserRole.AUTHOR, False),
            (UserRole.USER, False),
            (UserRole.BUSINESS_OWNER, False),
        ],
    )
    def test_can_administer(self, role, expected):
        assert policy.can_administer(make_user(role=role).as_caller()) is expected

    @pytest.mark.parametrize("role", ALL_ROLES)
    def test_suspended_callers_can_do_nothing(self, role):
        """Every predicate is false for a suspended caller."""
        # Arrange
        caller = make_user(role=role, status=UserStatus.SUSPENDED).as_caller()
        own_question = make_question(make_user())
        own_question = own_question.model_copy(update={"author_id": caller.user_id})

        # Act & Assert
        assert policy.can_participate(caller) is False
        assert policy.can_edit_question(caller, own_question) is False
        assert policy.can_delete_question(caller, own_question) is False
        assert policy.can_moderate(caller) is False
        assert policy.can_administer(caller) is False


class TestQuestionPredicates:
    """Permission matrix for question edits and deletes."""

    @pytest.mark.parametrize(
        "role,can_edit,can_delete",
        [
            (UserRole.ADMINISTRATOR, True, True),
            (UserRole.MODERATOR, True, True),
            (UserRole.AUTHOR, True, False),
            (UserRole.USER, False, False),
            (UserRole.BUSINESS_OWNER, False, False),
        ],
    )
    def test_non_author_rights_by_role(self, role, can_edit, can_delete):
        # Arrange
        question = make_question(make_user())
        caller = make_user(role=role).as_caller()

        # Act & Assert
        assert policy.can_edit_question(caller, question) is can_edit
        assert policy.can_delete_question(caller, question) is can_delete
        assert policy.can_accept_answer(caller, question) is can_edit

    @pytest.mark.parametrize("role", ALL_ROLES)
    def test_author_can_edit_and_delete_own(self, role):
        # Arrange
        author = make_user(role=role)
        question = make_question(author)

        # Act & Assert
        assert policy.can_edit_question(author.as_caller(), question) is True
        assert policy.can_delete_question(author.as_caller(), question) is True


class TestBusinessPredicates:
    @pytest.mark.parametrize(
        "role,expected",
        [
            (UserRole.ADMINISTRATOR, True),
            (UserRole.MODERATOR, True),
            (UserRole.AUTHOR, False),
            (UserRole.USER, False),
            (UserRole.BUSINESS_OWNER, False),
        ],
    )
    def test_non_owner_management_by_role(self, role, expected):
        business = make_business(make_user(role=UserRole.BUSINESS_OWNER))
        caller = make_user(role=role).as_caller()
        assert policy.can_manage_business(caller, business) is expected

    def test_owner_manages_own_listing(self):
        owner = make_user(role=UserRole.BUSINESS_OWNER)
        assert policy.can_manage_business(owner.as_caller(), make_business(owner)) is True


class TestRequire:
    def test_require_raises_with_context(self):
        # Arrange
        caller = make_user().as_caller()

        # Act & Assert
        with pytest.raises(PermissionDeniedError) as exc_info:
            policy.require(False, caller, "delete", "question", "q-1")
        assert exc_info.value.action == "delete"
        assert exc_info.value.user_id == str(caller.user_id)

    def test_require_passes_when_allowed(self):
        policy.require(True, make_user().as_caller(), "read", "question", "q-1")
