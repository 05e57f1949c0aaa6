"""Unit tests for the in-memory question repository."""

from datetime import timedelta

import pytest

from autohub.domain.repository.question import QuestionSortOrder
from autohub.persistence.repository.inmemory import InMemoryQuestionRepository
from tests.conftest import make_question, make_user


class TestCommitIfUnchanged:
    """Compare-and-set on the version column."""

    @pytest.mark.asyncio
    async def test_matching_version_commits_and_bumps(self):
        # Arrange
        repo = InMemoryQuestionRepository()
        voter = make_user()
        question = await repo.save(make_question(make_user()))
        changed = question.model_copy(update={"upvoted_by": [voter.id]})

        # Act
        committed = await repo.commit_if_unchanged(changed, expected_version=0)

        # Assert
        assert committed is True
        stored = await repo.find_by_id(question.id)
        assert stored.version == 1
        assert stored.upvotes == 1

    @pytest.mark.asyncio
    async def test_stale_version_is_refused(self):
        # Arrange
        repo = InMemoryQuestionRepository()
        question = await repo.save(make_question(make_user()))
        stale = question.model_copy(update={"upvoted_by": [make_user().id]})
        await repo.commit_if_unchanged(question, expected_version=0)

        # Act
        committed = await repo.commit_if_unchanged(stale, expected_version=0)

        # Assert
        assert committed is False
        assert (await repo.find_by_id(question.id)).upvotes == 0

    @pytest.mark.asyncio
    async def test_commit_keeps_concurrent_view_count(self):
        # Arrange
        repo = InMemoryQuestionRepository()
        question = await repo.save(make_question(make_user()))
        await repo.increment_views(question.id)

        # Act
        await repo.commit_if_unchanged(question, expected_version=0)

        # Assert
        stored = await repo.find_by_id(question.id)
        assert stored.views == 1
        assert stored.version == 1


class TestSorting:
    @pytest.mark.asyncio
    async def test_top_rated_then_newest(self):
        # Arrange
        repo = InMemoryQuestionRepository()
        author = make_user()
        base = make_question(author)
        older = base.model_copy(update={"created_at": base.created_at - timedelta(hours=1)})
        newer = make_question(author, title="Newer question")
        rated = make_question(author, title="Rated question").model_copy(
            update={
                "created_at": base.created_at - timedelta(days=1),
                "upvoted_by": [make_user().id],
            }
        )
        for question in (older, newer, rated):
            await repo.save(question)

        # Act
        top = await repo.find_all(sort=QuestionSortOrder.TOP_RATED)
        oldest = await repo.find_all(sort=QuestionSortOrder.OLDEST, limit=1)

        # Assert
        assert [q.id for q in top] == [rated.id, newer.id, older.id]
        assert [q.id for q in oldest] == [rated.id]
