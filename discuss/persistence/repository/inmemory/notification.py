"""In-memory notification repository for testing."""

from typing import List

from discuss.domain.model.notification import Notification, NotificationView
from discuss.domain.repository.notification import NotificationRepository
from discuss.domain.value import NotificationId, UserId

from .store import InMemoryStore


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._store.notifications[notification.id] = notification
        return notification

    async def find_views_for_user(self, user_id: UserId) -> List[NotificationView]:
        """Notifications newest first, outer-joined with comment and author."""
        views = []
        for notification in self._store.notifications.values():
            if notification.recipient_id != user_id:
                continue
            comment = self._store.comments.get(notification.comment_id)
            if comment is None:
                views.append(NotificationView(notification=notification))
                continue
            author = self._store.users.get(comment.author_id)
            views.append(
                NotificationView(
                    notification=notification,
                    comment_content=comment.content,
                    comment_author_username=author.username if author else None,
                )
            )
        views.sort(key=lambda v: v.notification.created_at, reverse=True)
        return views

    async def mark_read(self, notification_id: NotificationId, user_id: UserId) -> bool:
        """Mark one of the user's notifications read."""
        notification = self._store.notifications.get(notification_id)
        if notification is None or notification.recipient_id != user_id:
            return False
        self._store.notifications[notification_id] = notification.evolve(is_read=True)
        return True

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark all of the user's unread notifications read."""
        unread = [
            n
            for n in self._store.notifications.values()
            if n.recipient_id == user_id and not n.is_read
        ]
        for notification in unread:
            self._store.notifications[notification.id] = notification.evolve(
                is_read=True
            )
        return len(unread)

    async def count_unread(self, user_id: UserId) -> int:
        """Count the user's unread notifications."""
        return sum(
            1
            for n in self._store.notifications.values()
            if n.recipient_id == user_id and not n.is_read
        )
