"""Get unread notification count use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import NotificationService
from discuss.domain.value import UserId


class GetUnreadCountRequest(BaseModel):
    """Get unread count request."""

    user_id: str  # User ID from authenticated user


class GetUnreadCountResponse(BaseModel):
    """Get unread count response."""

    count: int


class GetUnreadCountUseCase:
    """Use case for the notification badge count."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        count = await self.notification_service.unread_count(
            UserId(UUID(request.user_id))
        )
        return GetUnreadCountResponse(count=count)
