"""Background job that purges comments past their restore window."""

import asyncio

import logfire
from dishka import AsyncContainer

from discuss.application.usecase.comment import (
    PurgeExpiredCommentsRequest,
    PurgeExpiredCommentsUseCase,
)
from discuss.config import ReaperSettings


class CommentReaper:
    """Periodically runs the purge use case.

    Each tick gets its own request scope, so it runs in a fresh database
    session and transaction. A failed tick is logged and the next tick
    runs on schedule.
    """

    def __init__(self, container: AsyncContainer, settings: ReaperSettings) -> None:
        """Initialize reaper.

        Args:
            container: Application (APP-scoped) DI container
            settings: Reaper settings
        """
        self.container = container
        self.settings = settings
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the purge loop. No-op if disabled or already running."""
        if not self.settings.enabled:
            logfire.info("Comment reaper disabled")
            return
        if self._task is None:
            self._task = asyncio.create_task(self._run(), name="comment-reaper")
            logfire.info(
                "Comment reaper started", interval_seconds=self.settings.interval_seconds
            )

    async def stop(self) -> None:
        """Cancel the purge loop and wait for it to finish."""
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
            logfire.info("Comment reaper stopped")

    async def run_once(self) -> int:
        """Run a single purge in its own request scope.

        Returns:
            Number of comments purged
        """
        with logfire.span("comment_reaper.run_once"):
            async with self.container() as request_container:
                use_case = await request_container.get(PurgeExpiredCommentsUseCase)
                result = await use_case.execute(PurgeExpiredCommentsRequest())
            if result.deleted_count:
                logfire.info("Reaper purged comments", count=result.deleted_count)
            return result.deleted_count

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.settings.interval_seconds)
            try:
                await self.run_once()
            except Exception as e:
                logfire.error("Comment reaper run failed", error=str(e))
