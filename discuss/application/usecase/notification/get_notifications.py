"""Get notifications use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from discuss.domain.model import NotificationView
from discuss.domain.service import NotificationService
from discuss.domain.value import NotificationType, UserId


class NotificationCommentItem(BaseModel):
    """The reply a notification points at, as it reads now."""

    id: str
    content: str
    username: str


class NotificationItem(BaseModel):
    """Notification item in response."""

    id: str
    type: NotificationType
    is_read: bool
    created_at: datetime
    comment: NotificationCommentItem | None  # None once the reply was purged


def _comment_item(view: NotificationView) -> NotificationCommentItem | None:
    if view.notification.comment_id is None or view.comment_content is None:
        return None
    return NotificationCommentItem(
        id=str(view.notification.comment_id),
        content=view.comment_content,
        username=str(view.comment_author_username),
    )


class GetNotificationsRequest(BaseModel):
    """Get notifications request."""

    user_id: str  # User ID from authenticated user


class GetNotificationsResponse(BaseModel):
    """Get notifications response."""

    notifications: list[NotificationItem]


class GetNotificationsUseCase:
    """Use case for listing the current user's notifications, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize get notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: GetNotificationsRequest
    ) -> GetNotificationsResponse:
        views = await self.notification_service.list_for_user(
            UserId(UUID(request.user_id))
        )
        return GetNotificationsResponse(
            notifications=[
                NotificationItem(
                    id=str(view.notification.id),
                    type=view.notification.type,
                    is_read=view.notification.is_read,
                    created_at=view.notification.created_at,
                    comment=_comment_item(view),
                )
                for view in views
            ]
        )
