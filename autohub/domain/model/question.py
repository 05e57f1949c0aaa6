"""Question aggregate.

A question owns its answers. Votes on the question and on each answer are
stored as membership sets on the records themselves (see ``Votable``).
Every change that derives from those sets goes through an optimistic
transaction keyed on ``version``.
"""

from datetime import datetime
from typing import Optional, Self

from pydantic import Field, computed_field, model_validator

from autohub.domain.model.common import utcnow
from autohub.domain.model.vote import Votable
from autohub.domain.value import AnswerId, QuestionId, TagName, UserId


class Answer(Votable):
    """An answer to a question."""

    id: AnswerId
    question_id: QuestionId
    body: str = Field(min_length=1, max_length=10000)
    author_id: UserId
    author_name: str = Field(min_length=1, max_length=100)
    created_at: datetime = Field(default_factory=utcnow)
    accepted: bool = False


class Question(Votable):
    """Question aggregate root.

    Business rules:
    - At most one answer is accepted
    - Answer ids are unique within the question
    - answer_count always equals the number of answers
    - views never decreases
    - version counts committed vote and answer changes; a write only
      lands if the version it read is still current
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1, max_length=10000)
    tags: list[TagName] = Field(default_factory=list, max_length=5)
    author_id: UserId
    author_name: str = Field(min_length=1, max_length=100)
    created_at: datetime = Field(default_factory=utcnow)
    views: int = Field(default=0, ge=0)
    answers: list[Answer] = Field(default_factory=list)
    version: int = Field(default=0, ge=0)

    @computed_field
    @property
    def answer_count(self) -> int:
        return len(self.answers)

    @model_validator(mode="after")
    def validate_answers(self) -> Self:
        """At most one accepted answer, no duplicate ids."""
        ids = [answer.id for answer in self.answers]
        if len(set(ids)) != len(ids):
            raise ValueError("Answer ids must be unique within a question")
        if sum(1 for answer in self.answers if answer.accepted) > 1:
            raise ValueError("A question can have at most one accepted answer")
        return self

    def find_answer(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by id."""
        for answer in self.answers:
            if answer.id == answer_id:
                return answer
        return None

    @property
    def accepted_answer(self) -> Optional[Answer]:
        for answer in self.answers:
            if answer.accepted:
                return answer
        return None
