"""Question and answer domain service.

Holds the vote, acceptance, view-count and deletion protocol. Every change
to vote memberships or answers runs as an optimistic transaction so that
concurrent voters never lose each other's votes.
"""

from typing import List, Optional
from uuid import uuid4

import logfire

from autohub.domain.error import NotFoundError, ValidationError
from autohub.domain.model import Answer, Question
from autohub.domain.policy import (
    can_accept_answer,
    can_delete_answer,
    can_delete_question,
    can_edit_question,
    can_participate,
    require,
)
from autohub.domain.repository import QuestionRepository, QuestionSortOrder
from autohub.domain.value import (
    ActivityType,
    AnswerId,
    Caller,
    QuestionId,
    TagName,
    UserId,
    VoteDirection,
)

from .activity_service import ActivityService
from .base import Service
from .transaction import Mutation, run_optimistic


class QuestionService(Service):
    """Domain service for question and answer operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        activity_service: ActivityService,
        max_attempts: int = 5,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            activity_service: Activity log service
            max_attempts: Retry budget of the optimistic transaction
        """
        self.question_repository = question_repository
        self.activity_service = activity_service
        self.max_attempts = max_attempts

    async def get_question_by_id(self, question_id: QuestionId) -> Question:
        """Get a question without counting a view.

        Raises:
            NotFoundError: If question doesn't exist
        """
        question = await self.question_repository.find_by_id(question_id)
        if question is None:
            raise NotFoundError("Question", str(question_id))
        return question

    async def list_questions(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[List[Question], int]:
        """One page of questions plus the total count."""
        total = await self.question_repository.count(tag=tag)
        questions = await self.question_repository.find_all(
            sort=sort, tag=tag, limit=limit, offset=offset
        )
        return questions, total

    async def ask_question(
        self, caller: Caller, title: str, body: str, tags: List[TagName]
    ) -> Question:
        """Create a question with no answers, votes or views.

        Raises:
            PermissionDeniedError: If caller is suspended
            ValidationError: If title or body is blank
        """
        with logfire.span("ask_question", user_id=str(caller.user_id)):
            require(can_participate(caller), caller, "create", "question", "new")
            title, body = title.strip(), body.strip()
            if not title or not body:
                raise ValidationError("Question title and body cannot be empty")

            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                body=body,
                tags=list(dict.fromkeys(tags)),
                author_id=caller.user_id,
                author_name=caller.name,
            )
            saved = await self.question_repository.save(question)

            await self.activity_service.log(
                f"New question asked: {title}",
                ActivityType.QUESTION,
                related_id=str(saved.id),
                user_id=caller.user_id,
            )
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def update_question(
        self,
        caller: Caller,
        question_id: QuestionId,
        title: Optional[str] = None,
        body: Optional[str] = None,
        tags: Optional[List[TagName]] = None,
    ) -> Question:
        """Overwrite the content fields of a question.

        Raises:
            NotFoundError: If question doesn't exist
            PermissionDeniedError: If caller is neither author nor staff
            ValidationError: If title or body is blank
        """
        with logfire.span("update_question", question_id=str(question_id)):
            question = await self.get_question_by_id(question_id)
            require(
                can_edit_question(caller, question),
                caller,
                "edit",
                "question",
                str(question_id),
            )

            new_title = title.strip() if title is not None else question.title
            new_body = body.strip() if body is not None else question.body
            if not new_title or not new_body:
                raise ValidationError("Question title and body cannot be empty")
            new_tags = list(dict.fromkeys(tags)) if tags is not None else question.tags

            # Run the new content through the model's field validation
            Question.model_validate(
                {**question.model_dump(), "title": new_title, "body": new_body, "tags": new_tags}
            )

            updated = await self.question_repository.update_content(
                question_id, new_title, new_body, new_tags
            )
            if updated is None:
                raise NotFoundError("Question", str(question_id))

            await self.activity_service.log(
                f"Question updated: {new_title}",
                ActivityType.QUESTION,
                related_id=str(question_id),
                user_id=caller.user_id,
            )
            return updated

    async def record_view(self, question_id: QuestionId) -> Question:
        """Count a view and return the question.

        The increment is best effort: if it fails, the question is still
        returned from a plain read with the count unchanged.

        Raises:
            NotFoundError: If question doesn't exist
        """
        with logfire.span("record_view", question_id=str(question_id)):
            try:
                question = await self.question_repository.increment_views(question_id)
            except Exception as e:
                logfire.warn(
                    "View increment failed, falling back to plain read",
                    question_id=str(question_id),
                    error=str(e),
                )
                question = await self.question_repository.find_by_id(question_id)

            if question is None:
                raise NotFoundError("Question", str(question_id))
            return question

    async def vote_on_question(
        self, caller: Caller, question_id: QuestionId, direction: VoteDirection
    ) -> Question:
        """Toggle the caller's vote on a question.

        Raises:
            NotFoundError: If question doesn't exist
            PermissionDeniedError: If caller is suspended
            TransactionConflictError: If contention outlasts the retry budget
        """
        with logfire.span(
            "vote_on_question",
            question_id=str(question_id),
            user_id=str(caller.user_id),
            direction=direction.value,
        ):
            require(can_participate(caller), caller, "vote on", "question", str(question_id))

            def mutate(question: Question) -> Question:
                return question.with_vote(caller.user_id, direction)

            return await self._transact(question_id, mutate)

    async def vote_on_answer(
        self,
        caller: Caller,
        question_id: QuestionId,
        answer_id: AnswerId,
        direction: VoteDirection,
    ) -> Question:
        """Toggle the caller's vote on one answer.

        Raises:
            NotFoundError: If question or answer doesn't exist
            PermissionDeniedError: If caller is suspended
            TransactionConflictError: If contention outlasts the retry budget
        """
        with logfire.span(
            "vote_on_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            user_id=str(caller.user_id),
            direction=direction.value,
        ):
            require(can_participate(caller), caller, "vote on", "answer", str(answer_id))

            def mutate(question: Question) -> Question:
                self._require_answer(question, answer_id)
                answers = [
                    answer.with_vote(caller.user_id, direction)
                    if answer.id == answer_id
                    else answer
                    for answer in question.answers
                ]
                return question.model_copy(update={"answers": answers})

            return await self._transact(question_id, mutate)

    async def post_answer(
        self, caller: Caller, question_id: QuestionId, body: str
    ) -> Answer:
        """Append a new answer to a question.

        Raises:
            NotFoundError: If question doesn't exist
            PermissionDeniedError: If caller is suspended
            ValidationError: If body is blank
        """
        with logfire.span(
            "post_answer", question_id=str(question_id), user_id=str(caller.user_id)
        ):
            require(can_participate(caller), caller, "answer", "question", str(question_id))
            body = body.strip()
            if not body:
                raise ValidationError("Answer body cannot be empty")

            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                body=body,
                author_id=caller.user_id,
                author_name=caller.name,
            )

            def mutate(question: Question) -> Question:
                return question.model_copy(update={"answers": [*question.answers, answer]})

            question = await self._transact(question_id, mutate)

            await self.activity_service.log(
                f"New answer on question: {question.title}",
                ActivityType.QUESTION,
                related_id=str(question_id),
                user_id=caller.user_id,
            )
            return answer

    async def toggle_accepted(
        self, caller: Caller, question_id: QuestionId, answer_id: AnswerId
    ) -> Question:
        """Accept an answer, or un-accept it if it already is.

        Accepting clears the flag on every other answer of the question.

        Raises:
            NotFoundError: If question or answer doesn't exist
            PermissionDeniedError: If caller is neither question author nor staff
        """
        with logfire.span(
            "toggle_accepted", question_id=str(question_id), answer_id=str(answer_id)
        ):

            def mutate(question: Question) -> Question:
                require(
                    can_accept_answer(caller, question),
                    caller,
                    "accept answers on",
                    "question",
                    str(question_id),
                )
                target = self._require_answer(question, answer_id)
                accept = not target.accepted
                answers = [
                    answer.model_copy(
                        update={"accepted": accept and answer.id == answer_id}
                    )
                    for answer in question.answers
                ]
                return question.model_copy(update={"answers": answers})

            question = await self._transact(question_id, mutate)
            accepted = question.accepted_answer
            logfire.info(
                "Accepted answer toggled",
                question_id=str(question_id),
                accepted_answer_id=str(accepted.id) if accepted else None,
            )
            return question

    async def delete_answer(
        self, caller: Caller, question_id: QuestionId, answer_id: AnswerId
    ) -> Question:
        """Remove an answer and its votes from a question.

        Raises:
            NotFoundError: If question or answer doesn't exist
            PermissionDeniedError: If caller is neither answer author nor moderator
        """
        with logfire.span(
            "delete_answer", question_id=str(question_id), answer_id=str(answer_id)
        ):

            def mutate(question: Question) -> Question:
                target = self._require_answer(question, answer_id)
                require(
                    can_delete_answer(caller, target),
                    caller,
                    "delete",
                    "answer",
                    str(answer_id),
                )
                answers = [a for a in question.answers if a.id != answer_id]
                return question.model_copy(update={"answers": answers})

            question = await self._transact(question_id, mutate)

            await self.activity_service.log(
                f"Answer deleted from question: {question.title}",
                ActivityType.QUESTION,
                related_id=str(question_id),
                user_id=caller.user_id,
            )
            return question

    async def delete_question(self, caller: Caller, question_id: QuestionId) -> None:
        """Delete a question with all its answers and votes.

        Raises:
            NotFoundError: If question doesn't exist
            PermissionDeniedError: If caller is neither author nor moderator
        """
        with logfire.span("delete_question", question_id=str(question_id)):
            question = await self.get_question_by_id(question_id)
            require(
                can_delete_question(caller, question),
                caller,
                "delete",
                "question",
                str(question_id),
            )

            if not await self.question_repository.delete(question_id):
                raise NotFoundError("Question", str(question_id))

            await self.activity_service.log(
                f"Question deleted: {question.title}",
                ActivityType.QUESTION,
                related_id=str(question_id),
                user_id=caller.user_id,
            )

    async def remove_user_contributions(self, user_id: UserId) -> int:
        """Withdraw everything a user added to the Q&A threads.

        Questions the user asked are deleted outright. On every other
        question their votes are withdrawn and their answers removed
        through the optimistic transaction, so counters and ``version``
        stay consistent with the remaining memberships.

        Returns:
            Number of questions changed or deleted
        """
        with logfire.span("remove_user_contributions", user_id=str(user_id)):
            question_ids = await self.question_repository.find_ids_involving(user_id)

            def mutate(question: Question) -> Question:
                answers = [
                    answer.without_voter(user_id)
                    for answer in question.answers
                    if answer.author_id != user_id
                ]
                return question.without_voter(user_id).model_copy(
                    update={"answers": answers}
                )

            touched = 0
            for question_id in question_ids:
                question = await self.question_repository.find_by_id(question_id)
                if question is None:
                    continue
                if question.author_id == user_id:
                    await self.question_repository.delete(question_id)
                else:
                    await self._transact(question_id, mutate)
                touched += 1

            logfire.info(
                "User contributions removed", user_id=str(user_id), questions=touched
            )
            return touched

    async def _transact(self, question_id: QuestionId, mutate: Mutation) -> Question:
        return await run_optimistic(
            load=lambda: self.question_repository.find_by_id(question_id),
            commit=self.question_repository.commit_if_unchanged,
            mutate=mutate,
            identifier=str(question_id),
            max_attempts=self.max_attempts,
        )

    @staticmethod
    def _require_answer(question: Question, answer_id: AnswerId) -> Answer:
        answer = question.find_answer(answer_id)
        if answer is None:
            raise NotFoundError("Answer", str(answer_id))
        return answer
