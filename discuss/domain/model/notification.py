"""Notification entity.

Notifications are created as a side effect of someone replying to a
comment. Recipients can only change their read state.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, NotificationId, NotificationType, UserId
from discuss.domain.value.types import Username
from discuss.util.clock import utc_now


class Notification(DomainModel):
    """Notification entity."""

    id: NotificationId
    recipient_id: UserId
    # The reply that triggered the notification; None once it was purged
    comment_id: Optional[CommentId]
    type: NotificationType = NotificationType.REPLY
    is_read: bool = False
    created_at: datetime = Field(default_factory=utc_now)


class NotificationView(DomainModel):
    """Notification joined with its comment at read time.

    Comment content and author username are never stored on the
    notification, so they always reflect the comment's current state.
    Both are None when the comment has been purged.
    """

    notification: Notification
    comment_content: Optional[str] = None
    comment_author_username: Optional[Username] = None
