"""Mark notification read use cases."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import NotificationService
from discuss.domain.value import NotificationId, UserId


class MarkNotificationReadRequest(BaseModel):
    """Mark one notification read."""

    notification_id: str
    user_id: str  # User ID from authenticated user


class MarkNotificationReadResponse(BaseModel):
    """Mark one notification read response."""

    id: str
    is_read: bool


class MarkNotificationReadUseCase:
    """Use case for marking a single notification read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkNotificationReadRequest
    ) -> MarkNotificationReadResponse:
        """Mark the notification read.

        Raises:
            NotFoundError: If the notification does not belong to the user
        """
        await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return MarkNotificationReadResponse(id=request.notification_id, is_read=True)


class MarkAllNotificationsReadRequest(BaseModel):
    """Mark all of a user's notifications read."""

    user_id: str  # User ID from authenticated user


class MarkAllNotificationsReadResponse(BaseModel):
    """Mark all read response."""

    updated_count: int


class MarkAllNotificationsReadUseCase:
    """Use case for marking every unread notification read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        count = await self.notification_service.mark_all_read(
            UserId(UUID(request.user_id))
        )
        return MarkAllNotificationsReadResponse(updated_count=count)
