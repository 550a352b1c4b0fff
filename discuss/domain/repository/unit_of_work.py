"""Unit of work interface."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

import logfire

AfterCommit = Callable[[], Awaitable[object]]


class UnitOfWork(ABC):
    """Transaction boundary of one request.

    Actions registered with ``after_commit`` run once the transaction is
    durable, in registration order. None of them run if the commit fails.
    """

    def __init__(self) -> None:
        self._after_commit: list[AfterCommit] = []

    def after_commit(self, action: AfterCommit) -> None:
        """Queue an action for the next successful commit."""
        self._after_commit.append(action)

    async def commit(self) -> None:
        """Commit pending writes, then run the queued actions.

        Raises:
            Exception: Whatever the underlying commit raises; queued
                actions are discarded in that case
        """
        actions, self._after_commit = self._after_commit, []
        await self._commit()
        for action in actions:
            try:
                await action()
            except Exception as e:
                logfire.error("After-commit action failed", error=repr(e))

    @abstractmethod
    async def _commit(self) -> None:
        """Make pending writes durable."""
        pass
