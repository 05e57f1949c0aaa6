"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from autohub.domain.model import Question
from autohub.domain.value import QuestionId, TagName, UserId


class QuestionSortOrder(str, Enum):
    """Sort order for question lists."""

    NEWEST = "newest"  # Most recently asked first
    OLDEST = "oldest"  # Oldest first
    TOP_ANSWERS = "top_answers"  # Most answers first
    TOP_RATED = "top_rated"  # Most upvotes first


class QuestionRepository(ABC):
    """Repository for the Question aggregate.

    A question is loaded together with its answers and the vote
    memberships of both. Fields are written through three separate paths
    so that concurrent writers never overwrite each other:

    - ``update_content``: title, body, tags (blind overwrite)
    - ``increment_views``: views (atomic increment)
    - ``commit_if_unchanged``: votes, answers, counters (compare-and-swap
      on ``version``)
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question with its answers and votes.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering, sorting and pagination.

        Args:
            sort: Sort order
            tag: Only questions carrying this tag
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            One page of questions
        """
        pass

    @abstractmethod
    async def count(self, tag: Optional[TagName] = None) -> int:
        """Count questions, optionally restricted to a tag."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Write a whole question, replacing any stored copy.

        This bypasses concurrency control and is meant for creating new
        questions. Existing questions are changed through the narrower
        methods below.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def update_content(
        self,
        question_id: QuestionId,
        title: str,
        body: str,
        tags: List[TagName],
    ) -> Optional[Question]:
        """Overwrite the caller-editable fields of a question.

        Votes, answers and views are left untouched.

        Returns:
            The updated question, or None if it does not exist
        """
        pass

    @abstractmethod
    async def commit_if_unchanged(
        self, question: Question, expected_version: int
    ) -> bool:
        """Store vote memberships, answers and counters if nobody else has.

        The write only happens when the stored version still equals
        ``expected_version``; the stored version is then incremented.
        Title, body, tags and views are never written here.

        Args:
            question: The question as mutated from a snapshot
            expected_version: Version of the snapshot it was derived from

        Returns:
            True if the write happened, False if the question changed
            concurrently or no longer exists
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically add one to the view counter.

        Does not change ``version``; views are independent of votes.

        Returns:
            The question after the increment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question together with its answers and votes.

        Returns:
            True if a question was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def find_ids_involving(self, user_id: UserId) -> List[QuestionId]:
        """Ids of questions the user asked, answered or voted on.

        Votes on any answer of a question count as involvement in that
        question.
        """
        pass
