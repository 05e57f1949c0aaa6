"""Vote membership shared by questions and answers.

Votes are not separate entities in the domain: each votable record carries
the set of users who upvoted it and the set who downvoted it. The counters
are derived from those sets, so they cannot drift from them.
"""

from typing import Self

from pydantic import Field, computed_field, model_validator

from autohub.domain.model.common import DomainModel
from autohub.domain.value import UserId, VoteDirection


class Votable(DomainModel):
    """Base for records that can be voted on.

    Business rules:
    - A user appears at most once in each membership list
    - A user is never in both lists at the same time
    - upvotes/downvotes always equal the list lengths
    """

    upvoted_by: list[UserId] = Field(default_factory=list)
    downvoted_by: list[UserId] = Field(default_factory=list)

    @computed_field
    @property
    def upvotes(self) -> int:
        return len(self.upvoted_by)

    @computed_field
    @property
    def downvotes(self) -> int:
        return len(self.downvoted_by)

    @computed_field
    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes

    @model_validator(mode="after")
    def validate_vote_membership(self) -> Self:
        """Reject duplicate voters and users holding both directions."""
        up = set(self.upvoted_by)
        down = set(self.downvoted_by)
        if len(up) != len(self.upvoted_by) or len(down) != len(self.downvoted_by):
            raise ValueError("A user can vote at most once per direction")
        if up & down:
            raise ValueError("A user cannot both upvote and downvote")
        return self

    def vote_of(self, user_id: UserId) -> VoteDirection | None:
        """Return the user's current vote, if any."""
        if user_id in self.upvoted_by:
            return VoteDirection.UP
        if user_id in self.downvoted_by:
            return VoteDirection.DOWN
        return None

    def with_vote(self, user_id: UserId, direction: VoteDirection) -> Self:
        """Apply a vote with toggle semantics.

        Voting in the direction the user already holds removes the vote;
        voting the other way moves it; otherwise the vote is added.
        """
        current = self.vote_of(user_id)
        upvoted_by = [u for u in self.upvoted_by if u != user_id]
        downvoted_by = [u for u in self.downvoted_by if u != user_id]

        if current != direction:
            if direction == VoteDirection.UP:
                upvoted_by.append(user_id)
            else:
                downvoted_by.append(user_id)

        return self.model_copy(
            update={"upvoted_by": upvoted_by, "downvoted_by": downvoted_by}
        )

    def without_voter(self, user_id: UserId) -> Self:
        """Drop the user's vote in either direction."""
        return self.model_copy(
            update={
                "upvoted_by": [u for u in self.upvoted_by if u != user_id],
                "downvoted_by": [u for u in self.downvoted_by if u != user_id],
            }
        )
