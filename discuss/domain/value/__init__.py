"""Domain value objects."""

from discuss.domain.value.identifiers import CommentId, NotificationId, UserId
from discuss.domain.value.types import (
    Email,
    NotificationType,
    RealtimeEvent,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    "NotificationId",
    # Types
    "Email",
    "Username",
    "NotificationType",
    "RealtimeEvent",
]
