"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import Any, List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import asc, delete, desc, func, insert, select, union, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from autohub.domain.model import Answer, Question
from autohub.domain.repository import QuestionRepository, QuestionSortOrder
from autohub.domain.value import QuestionId, TagName, UserId
from autohub.persistence.mappers import (
    answer_to_dict,
    question_to_dict,
    question_vote_rows,
    row_to_answer,
    row_to_question,
    split_votes,
)
from autohub.persistence.tables import answers_table, questions_table, votes_table

SORT_COLUMNS = {
    QuestionSortOrder.NEWEST: desc(questions_table.c.created_at),
    QuestionSortOrder.OLDEST: asc(questions_table.c.created_at),
    QuestionSortOrder.TOP_ANSWERS: desc(questions_table.c.answer_count),
    QuestionSortOrder.TOP_RATED: desc(questions_table.c.upvotes),
}


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository.

    Questions, answers and vote memberships live in three tables. Loading a
    page of questions costs three queries regardless of page size.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _hydrate(self, question_rows: Sequence[Any]) -> List[Question]:
        """Attach answers and vote memberships to question rows."""
        if not question_rows:
            return []

        question_ids = [row["id"] for row in question_rows]

        answer_result = await self.session.execute(
            select(answers_table)
            .where(answers_table.c.question_id.in_(question_ids))
            .order_by(asc(answers_table.c.created_at), asc(answers_table.c.id))
        )
        answer_rows = answer_result.mappings().all()

        vote_result = await self.session.execute(
            select(votes_table)
            .where(votes_table.c.question_id.in_(question_ids))
            .order_by(asc(votes_table.c.created_at))
        )
        memberships = split_votes(vote_result.mappings().all())

        answers_by_question: dict[UUID, list[Answer]] = defaultdict(list)
        for row in answer_rows:
            answers_by_question[row["question_id"]].append(
                row_to_answer(row, memberships.get(row["id"]))
            )

        return [
            row_to_question(
                row, answers_by_question.get(row["id"], []), memberships.get(row["id"])
            )
            for row in question_rows
        ]

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question with its answers and votes."""
        with logfire.span("question_repository.find_by_id", question_id=str(question_id)):
            result = await self.session.execute(
                select(questions_table).where(questions_table.c.id == question_id)
            )
            row = result.mappings().first()
            if row is None:
                return None

            questions = await self._hydrate([row])
            return questions[0]

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering, sorting and pagination."""
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            tag=tag.root if tag else None,
            limit=limit,
            offset=offset,
        ):
            stmt = select(questions_table)
            if tag:
                stmt = stmt.where(questions_table.c.tags.any(tag.root))

            # Newest first breaks ties, id keeps pages stable
            stmt = (
                stmt.order_by(
                    SORT_COLUMNS[sort],
                    desc(questions_table.c.created_at),
                    asc(questions_table.c.id),
                )
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            questions = await self._hydrate(result.mappings().all())
            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(self, tag: Optional[TagName] = None) -> int:
        """Count questions, optionally restricted to a tag."""
        stmt = select(func.count()).select_from(questions_table)
        if tag:
            stmt = stmt.where(questions_table.c.tags.any(tag.root))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Write a whole question, replacing any stored copy."""
        with logfire.span("question_repository.save", question_id=str(question.id)):
            await self.session.execute(
                delete(questions_table).where(questions_table.c.id == question.id)
            )
            await self.session.execute(
                insert(questions_table).values(**question_to_dict(question))
            )
            await self._write_children(question)
            await self.session.flush()
            return question

    async def update_content(
        self,
        question_id: QuestionId,
        title: str,
        body: str,
        tags: List[TagName],
    ) -> Optional[Question]:
        """Overwrite title, body and tags only."""
        with logfire.span(
            "question_repository.update_content", question_id=str(question_id)
        ):
            result = await self.session.execute(
                update(questions_table)
                .where(questions_table.c.id == question_id)
                .values(title=title, body=body, tags=[tag.root for tag in tags])
                .returning(questions_table.c.id)
            )
            if result.first() is None:
                return None
            return await self.find_by_id(question_id)

    async def commit_if_unchanged(
        self, question: Question, expected_version: int
    ) -> bool:
        """Compare-and-swap write of votes, answers and counters."""
        with logfire.span(
            "question_repository.commit_if_unchanged",
            question_id=str(question.id),
            expected_version=expected_version,
        ):
            # The conditional UPDATE takes the row lock; a concurrent writer
            # waits here and then matches zero rows.
            result = await self.session.execute(
                update(questions_table)
                .where(
                    questions_table.c.id == question.id,
                    questions_table.c.version == expected_version,
                )
                .values(
                    upvotes=question.upvotes,
                    downvotes=question.downvotes,
                    answer_count=question.answer_count,
                    version=expected_version + 1,
                )
                .returning(questions_table.c.id)
            )
            if result.first() is None:
                logfire.info("Version mismatch", question_id=str(question.id))
                return False

            kept_ids = [answer.id for answer in question.answers]
            await self.session.execute(
                delete(answers_table).where(
                    answers_table.c.question_id == question.id,
                    answers_table.c.id.not_in(kept_ids),
                )
            )
            await self.session.execute(
                delete(votes_table).where(votes_table.c.question_id == question.id)
            )
            await self._write_children(question)
            await self.session.flush()
            return True

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically add one to the view counter."""
        with logfire.span(
            "question_repository.increment_views", question_id=str(question_id)
        ):
            # Savepoint: a failed increment must not poison the request
            # transaction, so the caller can still fall back to a read.
            async with self.session.begin_nested():
                result = await self.session.execute(
                    update(questions_table)
                    .where(questions_table.c.id == question_id)
                    .values(views=questions_table.c.views + 1)
                    .returning(questions_table.c.id)
                )
                found = result.first() is not None
            if not found:
                return None
            return await self.find_by_id(question_id)

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question; answers and votes cascade."""
        with logfire.span("question_repository.delete", question_id=str(question_id)):
            result = await self.session.execute(
                delete(questions_table)
                .where(questions_table.c.id == question_id)
                .returning(questions_table.c.id)
            )
            deleted = result.first() is not None
            await self.session.flush()
            return deleted

    async def find_ids_involving(self, user_id: UserId) -> List[QuestionId]:
        """Ids of questions the user asked, answered or voted on."""
        stmt = union(
            select(questions_table.c.id).where(questions_table.c.author_id == user_id),
            select(answers_table.c.question_id).where(
                answers_table.c.author_id == user_id
            ),
            select(votes_table.c.question_id).where(votes_table.c.user_id == user_id),
        )
        result = await self.session.execute(stmt)
        return [QuestionId(row[0]) for row in result.all()]

    async def _write_children(self, question: Question) -> None:
        """Upsert answers and insert vote rows for a question."""
        # Un-accepting before accepting keeps the one-accepted index happy
        for answer in sorted(question.answers, key=lambda a: a.accepted):
            stmt = pg_insert(answers_table).values(**answer_to_dict(answer))
            stmt = stmt.on_conflict_do_update(
                index_elements=[answers_table.c.id],
                set_={
                    "upvotes": stmt.excluded.upvotes,
                    "downvotes": stmt.excluded.downvotes,
                    "accepted": stmt.excluded.accepted,
                },
            )
            await self.session.execute(stmt)

        vote_rows = question_vote_rows(question)
        if vote_rows:
            await self.session.execute(insert(votes_table), vote_rows)
