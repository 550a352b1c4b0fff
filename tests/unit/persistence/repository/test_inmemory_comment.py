"""Unit tests for the in-memory comment repository.

These pin down the purge and restore semantics the database enforces
through its foreign keys and conditional statements.
"""

from datetime import timedelta
from uuid import uuid4

import pytest

from discuss.domain.model import Notification
from discuss.domain.value import CommentId, NotificationId, UserId
from discuss.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
    InMemoryStore,
)
from tests.di import T0
from tests.helpers import make_comment


class TestRestore:
    @pytest.mark.asyncio
    async def test_restore_within_cutoff(self):
        repo = InMemoryCommentRepository()
        author = UserId(uuid4())
        comment = await make_comment(repo, author, created_at=T0, deleted_at=T0)

        restored = await repo.restore(comment.id, deleted_after=T0)

        assert restored is not None
        assert restored.is_deleted is False
        assert (await repo.find_by_id(comment.id)).is_deleted is False

    @pytest.mark.asyncio
    async def test_restore_older_than_cutoff_returns_none(self):
        repo = InMemoryCommentRepository()
        author = UserId(uuid4())
        comment = await make_comment(repo, author, created_at=T0, deleted_at=T0)

        restored = await repo.restore(
            comment.id, deleted_after=T0 + timedelta(seconds=1)
        )

        assert restored is None
        assert (await repo.find_by_id(comment.id)).is_deleted is True

    @pytest.mark.asyncio
    async def test_restore_missing_or_live_returns_none(self):
        repo = InMemoryCommentRepository()
        live = await make_comment(repo, UserId(uuid4()), created_at=T0)

        assert await repo.restore(live.id, deleted_after=T0) is None
        assert await repo.restore(CommentId(uuid4()), deleted_after=T0) is None


class TestPurge:
    @pytest.mark.asyncio
    async def test_purge_uses_strict_cutoff(self):
        repo = InMemoryCommentRepository()
        await make_comment(repo, UserId(uuid4()), created_at=T0, deleted_at=T0)

        assert await repo.purge_deleted_before(T0) == 0
        assert await repo.purge_deleted_before(T0 + timedelta(microseconds=1)) == 1

    @pytest.mark.asyncio
    async def test_purge_detaches_replies_and_notifications(self):
        store = InMemoryStore()
        comments = InMemoryCommentRepository(store)
        notifications = InMemoryNotificationRepository(store)
        author = UserId(uuid4())
        parent = await make_comment(comments, author, created_at=T0, deleted_at=T0)
        reply = await make_comment(
            comments, UserId(uuid4()), created_at=T0, parent_id=parent.id
        )
        await notifications.save(
            Notification(
                id=NotificationId(uuid4()),
                recipient_id=author,
                comment_id=parent.id,
                created_at=T0,
            )
        )

        purged = await comments.purge_deleted_before(T0 + timedelta(minutes=1))

        assert purged == 1
        assert (await comments.find_by_id(reply.id)).parent_id is None
        [view] = await notifications.find_views_for_user(author)
        assert view.notification.comment_id is None
        assert view.comment_content is None
        assert await notifications.count_unread(author) == 1
