"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from discuss.adapter.realtime import RecordingRealtimeGateway
from discuss.domain.error import NotFoundError
from discuss.domain.service import CommentService, NotificationService
from discuss.domain.value import NotificationId, NotificationType, UserId
from discuss.domain.repository import UnitOfWork, UserRepository
from discuss.util.clock import Clock
from tests.harness import create_env_fixture
from tests.helpers import make_user

unit_env = create_env_fixture()


async def _reply_notification(unit_env):
    """Alice posts, Bob replies, Alice is notified."""
    comment_service = await unit_env.get(CommentService)
    notification_service = await unit_env.get(NotificationService)
    user_repo = await unit_env.get(UserRepository)
    alice = await make_user(user_repo, "alice")
    bob = await make_user(user_repo, "bob")

    root = await comment_service.create_comment("Question", alice.id)
    reply = await comment_service.create_comment("Answer", bob.id, root.id)
    notification = await notification_service.notify_reply(
        alice.id, reply, bob.username
    )
    return alice, bob, reply, notification


class TestNotifyReply:
    @pytest.mark.asyncio
    async def test_stores_unread_reply_notification(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        clock = await unit_env.get(Clock)

        alice, _, reply, notification = await _reply_notification(unit_env)

        assert notification.recipient_id == alice.id
        assert notification.comment_id == reply.id
        assert notification.type == NotificationType.REPLY
        assert notification.is_read is False
        assert notification.created_at == clock.now()
        assert await notification_service.unread_count(alice.id) == 1

    @pytest.mark.asyncio
    async def test_push_waits_for_commit(self, unit_env):
        gateway = await unit_env.get(RecordingRealtimeGateway)
        unit_of_work = await unit_env.get(UnitOfWork)

        alice, _, _, _ = await _reply_notification(unit_env)
        assert gateway.sent_to(alice.id) == []

        await unit_of_work.commit()

        assert len(gateway.sent_to(alice.id)) == 1

    @pytest.mark.asyncio
    async def test_pushes_to_recipient(self, unit_env):
        gateway = await unit_env.get(RecordingRealtimeGateway)
        unit_of_work = await unit_env.get(UnitOfWork)

        alice, bob, reply, notification = await _reply_notification(unit_env)
        await unit_of_work.commit()

        messages = gateway.sent_to(alice.id)
        assert len(messages) == 1
        assert messages[0]["event"] == "notification"
        data = messages[0]["data"]
        assert data["id"] == str(notification.id)
        assert data["type"] == "reply"
        assert data["is_read"] is False
        assert data["comment"] == {
            "id": str(reply.id),
            "content": "Answer",
            "username": "bob",
        }
        assert gateway.sent_to(bob.id) == []

    @pytest.mark.asyncio
    async def test_offline_recipient_still_gets_stored_notification(self, unit_env):
        """No open session is not an error."""
        gateway = await unit_env.get(RecordingRealtimeGateway)
        gateway.connected = 0
        notification_service = await unit_env.get(NotificationService)

        alice, _, _, _ = await _reply_notification(unit_env)

        assert await notification_service.unread_count(alice.id) == 1


class TestListForUser:
    @pytest.mark.asyncio
    async def test_views_reflect_current_comment_content(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        comment_service = await unit_env.get(CommentService)

        alice, bob, reply, _ = await _reply_notification(unit_env)
        await comment_service.update_comment(reply.id, "Edited answer", bob.id)

        views = await notification_service.list_for_user(alice.id)

        assert len(views) == 1
        assert views[0].comment_content == "Edited answer"
        assert views[0].comment_author_username.root == "bob"

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)

        alice, bob, reply, first = await _reply_notification(unit_env)
        clock.advance(minutes=1)
        second_reply = await comment_service.create_comment(
            "Another answer", bob.id, reply.parent_id
        )
        second = await notification_service.notify_reply(
            alice.id, second_reply, bob.username
        )

        views = await notification_service.list_for_user(alice.id)

        assert [v.notification.id for v in views] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_other_users_see_nothing(self, unit_env):
        notification_service = await unit_env.get(NotificationService)

        _, bob, _, _ = await _reply_notification(unit_env)

        assert await notification_service.list_for_user(bob.id) == []


class TestReadState:
    @pytest.mark.asyncio
    async def test_mark_read_is_idempotent(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        alice, _, _, notification = await _reply_notification(unit_env)

        await notification_service.mark_read(notification.id, alice.id)
        await notification_service.mark_read(notification.id, alice.id)

        assert await notification_service.unread_count(alice.id) == 0

    @pytest.mark.asyncio
    async def test_mark_read_of_someone_elses_notification_raises(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        alice, bob, _, notification = await _reply_notification(unit_env)

        with pytest.raises(NotFoundError):
            await notification_service.mark_read(notification.id, bob.id)
        assert await notification_service.unread_count(alice.id) == 1

    @pytest.mark.asyncio
    async def test_mark_read_of_unknown_notification_raises(self, unit_env):
        notification_service = await unit_env.get(NotificationService)

        with pytest.raises(NotFoundError):
            await notification_service.mark_read(
                NotificationId(uuid4()), UserId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_mark_all_read_counts_changes(self, unit_env):
        """Reply -> one unread for the parent's author -> mark all -> zero."""
        notification_service = await unit_env.get(NotificationService)
        alice, _, _, _ = await _reply_notification(unit_env)

        assert await notification_service.mark_all_read(alice.id) == 1
        assert await notification_service.unread_count(alice.id) == 0
        assert await notification_service.mark_all_read(alice.id) == 0
