"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Soft-delete the comment. It stays restorable for the restore window.

        Raises:
            NotFoundError: If the comment is missing or already deleted
            ForbiddenError: If the user is not the author
        """
        await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            requester_id=UserId(UUID(request.user_id)),
        )
        return DeleteCommentResponse(message="Comment deleted successfully")
