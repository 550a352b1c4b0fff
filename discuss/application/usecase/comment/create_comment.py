"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from discuss.domain.model import Comment
from discuss.domain.repository import UnitOfWork
from discuss.domain.service import CommentService, FanoutService, NotificationService
from discuss.domain.value import CommentId, UserId, Username


class CommentResponse(BaseModel):
    """A single comment without its replies."""

    id: str
    content: str
    parent_id: str | None
    user_id: str
    username: str
    is_deleted: bool
    deleted_at: datetime | None
    created_at: datetime
    updated_at: datetime
    can_edit: bool

    @classmethod
    def from_comment(
        cls, comment: Comment, username: Username, can_edit: bool
    ) -> "CommentResponse":
        return cls(
            id=str(comment.id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            user_id=str(comment.author_id),
            username=username.root,
            is_deleted=comment.is_deleted,
            deleted_at=comment.deleted_at,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            can_edit=can_edit,
        )


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(CommentResponse):
    """Create comment response."""


class CreateCommentUseCase:
    """Use case for posting a top-level comment or a reply."""

    def __init__(
        self,
        comment_service: CommentService,
        notification_service: NotificationService,
        fanout_service: FanoutService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            notification_service: Notification domain service
            fanout_service: Real-time fan-out service
            unit_of_work: Request transaction, committed before any push
        """
        self.comment_service = comment_service
        self.notification_service = notification_service
        self.fanout_service = fanout_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Create comment via comment service (validates author, parent and
           thread depth)
        2. Queue a broadcast of the new comment to every connected client
        3. If replying to someone else's comment, notify that author
        4. Commit; the queued pushes go out once the rows are durable

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            NotFoundError: If the author or the parent comment is missing
            ValidationError: If the reply would nest deeper than allowed
            ValueError: If an ID is not a valid UUID
        """
        author_id = UserId(UUID(request.author_id))
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        comment = await self.comment_service.create_comment(
            content=request.content,
            author_id=author_id,
            parent_id=parent_id,
        )
        username = await self.comment_service.get_author_username(author_id)

        self.unit_of_work.after_commit(
            lambda: self.fanout_service.broadcast_new_comment(comment, username)
        )

        if parent_id:
            parent = await self.comment_service.get_comment_by_id(parent_id)
            # Replying to yourself produces no notification
            if parent and parent.author_id != author_id:
                await self.notification_service.notify_reply(
                    parent.author_id, comment, username
                )

        await self.unit_of_work.commit()

        return CreateCommentResponse.from_comment(comment, username, can_edit=True)
