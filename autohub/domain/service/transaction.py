"""Optimistic read-modify-write over a versioned question."""

from typing import Awaitable, Callable, Optional

import logfire

from autohub.domain.error import NotFoundError, TransactionConflictError
from autohub.domain.model import Question

Loader = Callable[[], Awaitable[Optional[Question]]]
Committer = Callable[[Question, int], Awaitable[bool]]
Mutation = Callable[[Question], Question]


async def run_optimistic(
    load: Loader,
    commit: Committer,
    mutate: Mutation,
    *,
    identifier: str,
    max_attempts: int,
) -> Question:
    """Apply ``mutate`` to the latest snapshot until the commit wins.

    Each attempt reads a fresh snapshot, derives the new state with the pure
    ``mutate`` function and commits it only if the stored version still
    matches the snapshot. Exceptions raised by ``mutate`` abort the loop
    and propagate unchanged.

    Args:
        load: Reads the current snapshot
        commit: Compare-and-swap write, returns False on a lost race
        mutate: Pure function from snapshot to new state
        identifier: Question id, for errors and logs
        max_attempts: Attempts before giving up

    Returns:
        The committed state, carrying its new version

    Raises:
        NotFoundError: If the question does not exist at read time
        TransactionConflictError: If every attempt lost a race
    """
    for attempt in range(1, max_attempts + 1):
        snapshot = await load()
        if snapshot is None:
            raise NotFoundError("Question", identifier)

        updated = mutate(snapshot)

        if await commit(updated, snapshot.version):
            return updated.model_copy(update={"version": snapshot.version + 1})

        logfire.info(
            "Optimistic commit lost a race, retrying",
            question_id=identifier,
            attempt=attempt,
            version=snapshot.version,
        )

    logfire.warn(
        "Optimistic transaction gave up",
        question_id=identifier,
        attempts=max_attempts,
    )
    raise TransactionConflictError("Question", identifier, max_attempts)
