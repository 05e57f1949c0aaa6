"""In-memory question repository for testing."""

import asyncio
from typing import List, Optional

from autohub.domain.model import Question
from autohub.domain.repository.question import QuestionRepository, QuestionSortOrder
from autohub.domain.value import QuestionId, TagName, UserId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing.

    Reads take their snapshot first and then yield to the event loop, so
    concurrent tasks interleave between loading a snapshot and writing it
    back the way they would against a real database.
    """

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        snapshot = self._questions.get(question_id)
        await asyncio.sleep(0)
        return snapshot

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination."""
        questions = list(self._questions.values())

        # Filter by tag
        if tag is not None:
            questions = [q for q in questions if tag in q.tags]

        # Newest first breaks ties for every order
        questions.sort(key=lambda q: q.created_at, reverse=True)
        if sort == QuestionSortOrder.OLDEST:
            questions.sort(key=lambda q: q.created_at)
        elif sort == QuestionSortOrder.TOP_ANSWERS:
            questions.sort(key=lambda q: q.answer_count, reverse=True)
        elif sort == QuestionSortOrder.TOP_RATED:
            questions.sort(key=lambda q: q.upvotes, reverse=True)

        # Paginate
        return questions[offset : offset + limit]

    async def count(self, tag: Optional[TagName] = None) -> int:
        """Count questions, optionally restricted to a tag."""
        if tag is None:
            return len(self._questions)
        return sum(1 for q in self._questions.values() if tag in q.tags)

    async def save(self, question: Question) -> Question:
        """Save a question, replacing any stored copy."""
        self._questions[question.id] = question
        return question

    async def update_content(
        self,
        question_id: QuestionId,
        title: str,
        body: str,
        tags: List[TagName],
    ) -> Optional[Question]:
        """Overwrite title, body and tags."""
        stored = self._questions.get(question_id)
        if stored is None:
            return None
        updated = stored.model_copy(update={"title": title, "body": body, "tags": tags})
        self._questions[question_id] = updated
        return updated

    async def commit_if_unchanged(
        self, question: Question, expected_version: int
    ) -> bool:
        """Store votes and answers if the version still matches."""
        stored = self._questions.get(question.id)
        if stored is None or stored.version != expected_version:
            return False

        self._questions[question.id] = stored.model_copy(
            update={
                "upvoted_by": list(question.upvoted_by),
                "downvoted_by": list(question.downvoted_by),
                "answers": list(question.answers),
                "version": expected_version + 1,
            }
        )
        return True

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Add one to the view counter."""
        stored = self._questions.get(question_id)
        if stored is None:
            return None
        updated = stored.model_copy(update={"views": stored.views + 1})
        self._questions[question_id] = updated
        return updated

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question."""
        return self._questions.pop(question_id, None) is not None

    async def find_ids_involving(self, user_id: UserId) -> List[QuestionId]:
        """Ids of questions the user asked, answered or voted on."""

        def involved(question: Question) -> bool:
            if question.author_id == user_id or question.vote_of(user_id) is not None:
                return True
            return any(
                answer.author_id == user_id or answer.vote_of(user_id) is not None
                for answer in question.answers
            )

        return [q.id for q in self._questions.values() if involved(q)]
