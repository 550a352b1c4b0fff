"""Domain model entities."""

from discuss.domain.model.comment import (
    EDIT_WINDOW,
    MAX_THREAD_DEPTH,
    RESTORE_WINDOW,
    Comment,
)
from discuss.domain.model.notification import Notification, NotificationView
from discuss.domain.model.user import User

__all__ = [
    "User",
    "Comment",
    "Notification",
    "NotificationView",
    "EDIT_WINDOW",
    "MAX_THREAD_DEPTH",
    "RESTORE_WINDOW",
]
