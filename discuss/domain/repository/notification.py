"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List

from discuss.domain.model.notification import Notification, NotificationView
from discuss.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Persist a new notification.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def find_views_for_user(self, user_id: UserId) -> List[NotificationView]:
        """List a user's notifications joined with their comments.

        Args:
            user_id: Recipient user ID

        Returns:
            Notifications newest first, with current comment content and
            comment author username
        """
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId, user_id: UserId) -> bool:
        """Mark one notification read.

        Args:
            notification_id: Notification to mark
            user_id: Owner; notifications of other users are not matched

        Returns:
            True if a notification with that id belongs to the user
        """
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every unread notification of a user read.

        Args:
            user_id: Recipient user ID

        Returns:
            Number of notifications changed
        """
        pass

    @abstractmethod
    async def count_unread(self, user_id: UserId) -> int:
        """Count unread notifications of a user.

        Args:
            user_id: Recipient user ID

        Returns:
            Number of unread notifications
        """
        pass
