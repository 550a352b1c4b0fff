"""Notification domain service."""

from uuid import uuid4

import logfire

from discuss.domain.error import NotFoundError
from discuss.domain.model import Comment, Notification, NotificationView
from discuss.domain.repository import NotificationRepository, UnitOfWork
from discuss.domain.value import NotificationId, NotificationType, UserId, Username
from discuss.util.clock import Clock

from .fanout_service import FanoutService


class NotificationService:
    """Domain service for reply notifications and their read state."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        fanout_service: FanoutService,
        unit_of_work: UnitOfWork,
        clock: Clock,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            fanout_service: Real-time fan-out service
            unit_of_work: Commit boundary the push waits for
            clock: Source of the current time
        """
        self.notification_repository = notification_repository
        self.fanout_service = fanout_service
        self.unit_of_work = unit_of_work
        self.clock = clock

    async def notify_reply(
        self, recipient_id: UserId, reply: Comment, replier_username: Username
    ) -> Notification:
        """Record a reply notification and push it to the recipient.

        The push is queued on the unit of work and goes out only after the
        caller commits, so the recipient can always fetch what was pushed.
        A recipient with no open session sees it on the next fetch.

        Args:
            recipient_id: Author of the comment being replied to
            reply: The new reply
            replier_username: Username of the reply's author

        Returns:
            The stored notification
        """
        with logfire.span(
            "notification_service.notify_reply",
            recipient_id=str(recipient_id),
            comment_id=str(reply.id),
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                comment_id=reply.id,
                type=NotificationType.REPLY,
                is_read=False,
                created_at=self.clock.now(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Reply notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
            )

            self.unit_of_work.after_commit(
                lambda: self.fanout_service.push_to_user(
                    recipient_id, saved, reply, replier_username
                )
            )
            return saved

    async def list_for_user(self, user_id: UserId) -> list[NotificationView]:
        """List a user's notifications, newest first."""
        with logfire.span("notification_service.list_for_user", user_id=str(user_id)):
            return await self.notification_repository.find_views_for_user(user_id)

    async def mark_read(self, notification_id: NotificationId, user_id: UserId) -> None:
        """Mark one notification read. Marking it again is a no-op.

        Raises:
            NotFoundError: If no notification with that id belongs to the user
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            user_id=str(user_id),
        ):
            found = await self.notification_repository.mark_read(
                notification_id, user_id
            )
            if not found:
                logfire.warn(
                    "Notification not found",
                    notification_id=str(notification_id),
                    user_id=str(user_id),
                )
                raise NotFoundError("Notification", str(notification_id))

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark all of a user's unread notifications read.

        Returns:
            Number of notifications changed
        """
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            count = await self.notification_repository.mark_all_read(user_id)
            logfire.info("Notifications marked read", user_id=str(user_id), count=count)
            return count

    async def unread_count(self, user_id: UserId) -> int:
        with logfire.span("notification_service.unread_count", user_id=str(user_id)):
            return await self.notification_repository.count_unread(user_id)
