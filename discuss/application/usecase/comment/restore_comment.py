"""Restore comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, UserId

from .create_comment import CommentResponse


class RestoreCommentRequest(BaseModel):
    """Restore comment request."""

    comment_id: str
    user_id: str  # User ID from authenticated user


class RestoreCommentResponse(CommentResponse):
    """Restore comment response."""


class RestoreCommentUseCase:
    """Use case for undoing a soft delete within the restore window."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize restore comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: RestoreCommentRequest) -> RestoreCommentResponse:
        """Execute restore comment flow.

        Raises:
            NotFoundError: If no soft-deleted comment has that ID
            ForbiddenError: If the user is not the author
            InvalidStateError: If the restore window has expired
        """
        user_id = UserId(UUID(request.user_id))
        comment = await self.comment_service.restore_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            requester_id=user_id,
        )
        username = await self.comment_service.get_author_username(user_id)
        can_edit = self.comment_service.is_editable(comment)
        return RestoreCommentResponse.from_comment(comment, username, can_edit)
