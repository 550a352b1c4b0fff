"""Purge expired comments use case."""

from pydantic import BaseModel

from discuss.domain.service import CommentService


class PurgeExpiredCommentsRequest(BaseModel):
    """Purge request. Empty; the cutoff comes from the clock."""


class PurgeExpiredCommentsResponse(BaseModel):
    """Purge response."""

    deleted_count: int


class PurgeExpiredCommentsUseCase:
    """Use case for hard-deleting comments past their restore window.

    Run by the background reaper and by the manual cleanup endpoint.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: PurgeExpiredCommentsRequest
    ) -> PurgeExpiredCommentsResponse:
        count = await self.comment_service.purge_expired()
        return PurgeExpiredCommentsResponse(deleted_count=count)
