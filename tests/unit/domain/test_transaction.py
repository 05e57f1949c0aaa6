"""Unit tests for the optimistic transaction loop."""

import pytest

from autohub.domain.error import NotFoundError, TransactionConflictError
from autohub.domain.service.transaction import run_optimistic
from autohub.domain.value import VoteDirection
from tests.conftest import make_question, make_user


class TestRunOptimistic:
    """Tests for run_optimistic."""

    @pytest.mark.asyncio
    async def test_retries_until_commit_wins(self):
        """Each retry re-reads and re-applies the mutation."""
        # Arrange
        question = make_question(make_user())
        voter = make_user().id
        loads = []
        outcomes = iter([False, False, True])

        async def load():
            loads.append(1)
            return question

        async def commit(updated, expected_version):
            return next(outcomes)

        # Act
        result = await run_optimistic(
            load=load,
            commit=commit,
            mutate=lambda q: q.with_vote(voter, VoteDirection.UP),
            identifier=str(question.id),
            max_attempts=5,
        )

        # Assert
        assert len(loads) == 3
        assert result.upvoted_by == [voter]
        assert result.version == question.version + 1

    @pytest.mark.asyncio
    async def test_raises_conflict_after_budget(self):
        # Arrange
        question = make_question(make_user())

        async def load():
            return question

        async def commit(updated, expected_version):
            return False

        # Act & Assert
        with pytest.raises(TransactionConflictError):
            await run_optimistic(
                load=load,
                commit=commit,
                mutate=lambda q: q,
                identifier=str(question.id),
                max_attempts=2,
            )

    @pytest.mark.asyncio
    async def test_missing_snapshot_raises_not_found(self):
        # Arrange
        async def load():
            return None

        async def commit(updated, expected_version):
            return True

        # Act & Assert
        with pytest.raises(NotFoundError):
            await run_optimistic(
                load=load,
                commit=commit,
                mutate=lambda q: q,
                identifier="missing",
                max_attempts=3,
            )

    @pytest.mark.asyncio
    async def test_mutation_error_aborts_without_commit(self):
        """Errors from the mutation propagate and nothing is written."""
        # Arrange
        question = make_question(make_user())
        commits = []

        async def load():
            return question

        async def commit(updated, expected_version):
            commits.append(updated)
            return True

        def mutate(q):
            raise NotFoundError("Answer", "nope")

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer"):
            await run_optimistic(
                load=load,
                commit=commit,
                mutate=mutate,
                identifier=str(question.id),
                max_attempts=3,
            )
        assert commits == []
