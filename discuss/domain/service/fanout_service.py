"""Real-time fan-out domain service."""

from datetime import datetime
from typing import Any

import logfire
from pydantic import BaseModel

from discuss.domain.model import Comment, Notification
from discuss.domain.value import RealtimeEvent, UserId, Username


class RealtimeGateway:
    """Transport for pushing events to connected clients.

    Delivery is fire-and-forget: implementations never raise for a
    missing or broken session, they only report how many sessions were
    reached.
    """

    async def broadcast(self, event: RealtimeEvent, payload: dict[str, Any]) -> int:
        """Push an event to every connected session.

        Args:
            event: Event name
            payload: JSON-serialisable event body

        Returns:
            Number of sessions the event was sent to
        """
        raise NotImplementedError

    async def send_to_user(
        self, user_id: UserId, event: RealtimeEvent, payload: dict[str, Any]
    ) -> int:
        """Push an event to the sessions registered for one user.

        Args:
            user_id: Recipient user ID
            event: Event name
            payload: JSON-serialisable event body

        Returns:
            Number of sessions the event was sent to (0 if none connected)
        """
        raise NotImplementedError


class CommentEvent(BaseModel):
    """Body of a ``comment:new`` event."""

    id: str
    content: str
    parent_id: str | None
    user_id: str
    username: str
    created_at: datetime
    updated_at: datetime


class NotificationCommentInfo(BaseModel):
    """Comment summary embedded in a notification event."""

    id: str
    content: str
    username: str


class NotificationEvent(BaseModel):
    """Body of a ``notification`` event."""

    id: str
    type: str
    is_read: bool
    created_at: datetime
    comment: NotificationCommentInfo


class FanoutService:
    """Domain service that turns state changes into real-time events."""

    def __init__(self, gateway: RealtimeGateway) -> None:
        """Initialize fan-out service.

        Args:
            gateway: Real-time transport
        """
        self.gateway = gateway

    async def broadcast_new_comment(self, comment: Comment, username: Username) -> int:
        """Announce a new comment to every connected client.

        Args:
            comment: The comment just created
            username: Author's username

        Returns:
            Number of sessions reached
        """
        event = CommentEvent(
            id=str(comment.id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            user_id=str(comment.author_id),
            username=username.root,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
        sent = await self.gateway.broadcast(
            RealtimeEvent.NEW_COMMENT, event.model_dump(mode="json")
        )
        logfire.info("New comment broadcast", comment_id=str(comment.id), sessions=sent)
        return sent

    async def push_to_user(
        self,
        user_id: UserId,
        notification: Notification,
        reply: Comment,
        replier_username: Username,
    ) -> int:
        """Push a notification to its recipient's open sessions.

        A recipient with no open sessions is not an error; the stored
        notification is picked up on the next fetch.

        Args:
            user_id: Recipient user ID
            notification: The stored notification
            reply: The comment that triggered it
            replier_username: Username of the reply's author

        Returns:
            Number of sessions reached
        """
        event = NotificationEvent(
            id=str(notification.id),
            type=notification.type.value,
            is_read=notification.is_read,
            created_at=notification.created_at,
            comment=NotificationCommentInfo(
                id=str(reply.id),
                content=reply.content,
                username=replier_username.root,
            ),
        )
        sent = await self.gateway.send_to_user(
            user_id, RealtimeEvent.NOTIFICATION, event.model_dump(mode="json")
        )
        logfire.info(
            "Notification pushed",
            notification_id=str(notification.id),
            recipient_id=str(user_id),
            sessions=sent,
        )
        return sent
