"""PostgreSQL implementation of Notification repository."""

from typing import List

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Notification, NotificationView
from discuss.domain.repository import NotificationRepository
from discuss.domain.value import NotificationId, UserId
from discuss.persistence.mappers import notification_to_dict, row_to_notification_view
from discuss.persistence.tables import (
    comments_table,
    notifications_table,
    users_table,
)


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        stmt = notifications_table.insert().values(
            **notification_to_dict(notification)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def find_views_for_user(self, user_id: UserId) -> List[NotificationView]:
        """Notifications newest first, outer-joined with comment and author."""
        stmt = (
            select(
                notifications_table,
                comments_table.c.content.label("comment_content"),
                users_table.c.username.label("comment_author_username"),
            )
            .select_from(
                notifications_table.outerjoin(
                    comments_table,
                    notifications_table.c.comment_id == comments_table.c.id,
                ).outerjoin(
                    users_table, comments_table.c.author_id == users_table.c.id
                )
            )
            .where(notifications_table.c.recipient_id == user_id)
            .order_by(notifications_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_notification_view(dict(row)) for row in result.mappings()]

    async def mark_read(self, notification_id: NotificationId, user_id: UserId) -> bool:
        """Set is_read on one of the user's notifications."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .where(notifications_table.c.recipient_id == user_id)
            .values(is_read=True)
            .returning(notifications_table.c.id)
        )
        result = await self.session.execute(stmt)
        found = result.fetchone() is not None
        await self.session.flush()
        return found

    async def mark_all_read(self, user_id: UserId) -> int:
        """Set is_read on all of the user's unread notifications."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.recipient_id == user_id)
            .where(notifications_table.c.is_read.is_(False))
            .values(is_read=True)
            .returning(notifications_table.c.id)
        )
        result = await self.session.execute(stmt)
        changed = result.fetchall()
        await self.session.flush()
        return len(changed)

    async def count_unread(self, user_id: UserId) -> int:
        """Count the user's unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(notifications_table.c.recipient_id == user_id)
            .where(notifications_table.c.is_read.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
