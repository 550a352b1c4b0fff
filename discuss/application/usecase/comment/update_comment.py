"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, UserId

from .create_comment import CommentResponse


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    user_id: str  # User ID from authenticated user
    content: str


class UpdateCommentResponse(CommentResponse):
    """Update comment response."""


class UpdateCommentUseCase:
    """Use case for editing a comment within its edit window."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment is missing or deleted
            ForbiddenError: If the user is not the author
            InvalidStateError: If the edit window has expired
        """
        user_id = UserId(UUID(request.user_id))
        comment = await self.comment_service.update_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            content=request.content,
            requester_id=user_id,
        )
        username = await self.comment_service.get_author_username(user_id)
        can_edit = self.comment_service.is_editable(comment)
        return UpdateCommentResponse.from_comment(comment, username, can_edit)
