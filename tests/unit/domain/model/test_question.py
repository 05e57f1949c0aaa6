"""Unit tests for vote membership and the question aggregate."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from autohub.domain.model import Answer
from autohub.domain.value import AnswerId, UserId, VoteDirection
from tests.conftest import make_question, make_user


def _answer(question, accepted: bool = False) -> Answer:
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question.id,
        body="Check the timing belt.",
        author_id=UserId(uuid4()),
        author_name="Mechanic",
        accepted=accepted,
    )


class TestVoteToggle:
    """Tests for Votable.with_vote."""

    def test_first_vote_is_added(self):
        """Voting with no prior vote adds the user to that direction."""
        # Arrange
        question = make_question(make_user())
        voter = UserId(uuid4())

        # Act
        voted = question.with_vote(voter, VoteDirection.UP)

        # Assert
        assert voted.upvoted_by == [voter]
        assert voted.upvotes == 1
        assert voted.downvotes == 0
        assert voted.vote_of(voter) == VoteDirection.UP

    def test_repeating_a_vote_removes_it(self):
        """Voting the same way twice leaves no vote."""
        # Arrange
        question = make_question(make_user())
        voter = UserId(uuid4())

        # Act
        voted = question.with_vote(voter, VoteDirection.DOWN).with_vote(
            voter, VoteDirection.DOWN
        )

        # Assert
        assert voted.downvoted_by == []
        assert voted.vote_of(voter) is None

    def test_opposite_vote_switches_direction(self):
        """Voting the other way moves the vote instead of stacking it."""
        # Arrange
        question = make_question(make_user())
        voter = UserId(uuid4())

        # Act
        voted = question.with_vote(voter, VoteDirection.UP).with_vote(
            voter, VoteDirection.DOWN
        )

        # Assert
        assert voted.upvoted_by == []
        assert voted.downvoted_by == [voter]
        assert voted.score == -1

    def test_other_voters_are_untouched(self):
        # Arrange
        question = make_question(make_user())
        alice, bob = UserId(uuid4()), UserId(uuid4())
        question = question.with_vote(alice, VoteDirection.UP)

        # Act
        voted = question.with_vote(bob, VoteDirection.UP)

        # Assert
        assert set(voted.upvoted_by) == {alice, bob}
        assert voted.upvotes == 2

    def test_user_in_both_lists_is_rejected(self):
        """A user cannot hold an upvote and a downvote at once."""
        # Arrange
        question = make_question(make_user())
        voter = UserId(uuid4())

        # Act & Assert
        with pytest.raises(ValidationError, match="both upvote and downvote"):
            type(question).model_validate(
                {
                    **question.model_dump(),
                    "upvoted_by": [voter],
                    "downvoted_by": [voter],
                }
            )


class TestQuestionInvariants:
    """Tests for Question validation."""

    def test_answer_count_tracks_answers(self):
        # Arrange
        question = make_question(make_user())

        # Act
        with_answers = question.model_copy(
            update={"answers": [_answer(question), _answer(question)]}
        )

        # Assert
        assert question.answer_count == 0
        assert with_answers.answer_count == 2

    def test_two_accepted_answers_are_rejected(self):
        """At most one answer can be accepted."""
        # Arrange
        question = make_question(make_user())
        answers = [_answer(question, accepted=True), _answer(question, accepted=True)]

        # Act & Assert
        with pytest.raises(ValidationError, match="at most one accepted answer"):
            type(question).model_validate(
                {**question.model_dump(exclude={"answer_count"}), "answers": answers}
            )

    def test_accepted_answer_property(self):
        # Arrange
        question = make_question(make_user())
        accepted = _answer(question, accepted=True)
        question = question.model_copy(update={"answers": [_answer(question), accepted]})

        # Act & Assert
        assert question.accepted_answer == accepted
        assert question.find_answer(accepted.id) == accepted
        assert question.find_answer(AnswerId(uuid4())) is None
