"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from discuss.adapter.realtime import RecordingRealtimeGateway
from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.domain.error import NotFoundError
from discuss.domain.repository import UnitOfWork, UserRepository
from discuss.domain.service import NotificationService
from tests.harness import create_env_fixture
from tests.helpers import make_user

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_top_level_comment_is_broadcast(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        gateway = await unit_env.get(RecordingRealtimeGateway)
        alice = await make_user(await unit_env.get(UserRepository), "alice")

        # Act
        response = await use_case.execute(
            CreateCommentRequest(content="Hello", author_id=str(alice.id))
        )

        # Assert
        assert response.username == "alice"
        assert response.user_id == str(alice.id)
        assert response.parent_id is None
        assert response.can_edit is True
        assert response.is_deleted is False
        assert len(gateway.broadcasts) == 1
        message = gateway.broadcasts[0]
        assert message["event"] == "comment:new"
        assert message["data"]["id"] == response.id
        assert message["data"]["username"] == "alice"
        assert gateway.direct == []

    @pytest.mark.asyncio
    async def test_reply_notifies_parent_author(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        notification_service = await unit_env.get(NotificationService)
        gateway = await unit_env.get(RecordingRealtimeGateway)
        user_repo = await unit_env.get(UserRepository)
        alice = await make_user(user_repo, "alice")
        bob = await make_user(user_repo, "bob")

        parent = await use_case.execute(
            CreateCommentRequest(content="Question", author_id=str(alice.id))
        )

        # Act
        reply = await use_case.execute(
            CreateCommentRequest(
                content="Answer", author_id=str(bob.id), parent_id=parent.id
            )
        )

        # Assert
        assert reply.parent_id == parent.id
        assert await notification_service.unread_count(alice.id) == 1
        assert await notification_service.unread_count(bob.id) == 0
        pushed = gateway.sent_to(alice.id)
        assert len(pushed) == 1
        assert pushed[0]["data"]["comment"]["id"] == reply.id
        assert pushed[0]["data"]["comment"]["username"] == "bob"
        assert len(gateway.broadcasts) == 2

    @pytest.mark.asyncio
    async def test_self_reply_does_not_notify(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        notification_service = await unit_env.get(NotificationService)
        gateway = await unit_env.get(RecordingRealtimeGateway)
        alice = await make_user(await unit_env.get(UserRepository), "alice")

        parent = await use_case.execute(
            CreateCommentRequest(content="Question", author_id=str(alice.id))
        )
        await use_case.execute(
            CreateCommentRequest(
                content="Never mind", author_id=str(alice.id), parent_id=parent.id
            )
        )

        assert await notification_service.unread_count(alice.id) == 0
        assert gateway.direct == []

    @pytest.mark.asyncio
    async def test_missing_parent_raises_and_broadcasts_nothing(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        gateway = await unit_env.get(RecordingRealtimeGateway)
        alice = await make_user(await unit_env.get(UserRepository), "alice")

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    content="Orphan",
                    author_id=str(alice.id),
                    parent_id=str(uuid4()),
                )
            )
        assert gateway.broadcasts == []

    @pytest.mark.asyncio
    async def test_malformed_parent_id_raises_value_error(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        alice = await make_user(await unit_env.get(UserRepository), "alice")

        with pytest.raises(ValueError):
            await use_case.execute(
                CreateCommentRequest(
                    content="Reply", author_id=str(alice.id), parent_id="not-a-uuid"
                )
            )

    @pytest.mark.asyncio
    async def test_pushes_go_out_after_commit(self, unit_env, monkeypatch):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        gateway = await unit_env.get(RecordingRealtimeGateway)
        unit_of_work = await unit_env.get(UnitOfWork)
        user_repo = await unit_env.get(UserRepository)
        alice = await make_user(user_repo, "alice")
        bob = await make_user(user_repo, "bob")
        parent = await use_case.execute(
            CreateCommentRequest(content="Question", author_id=str(alice.id))
        )

        seen: list[tuple[str, int]] = []
        broadcast, send_to_user = gateway.broadcast, gateway.send_to_user

        async def recording_broadcast(event, payload):
            seen.append(("broadcast", unit_of_work.commits))
            return await broadcast(event, payload)

        async def recording_send_to_user(user_id, event, payload):
            seen.append(("direct", unit_of_work.commits))
            return await send_to_user(user_id, event, payload)

        monkeypatch.setattr(gateway, "broadcast", recording_broadcast)
        monkeypatch.setattr(gateway, "send_to_user", recording_send_to_user)
        commits_before = unit_of_work.commits

        # Act
        await use_case.execute(
            CreateCommentRequest(
                content="Answer", author_id=str(bob.id), parent_id=parent.id
            )
        )

        # Assert
        assert seen == [
            ("broadcast", commits_before + 1),
            ("direct", commits_before + 1),
        ]

    @pytest.mark.asyncio
    async def test_failed_commit_pushes_nothing(self, unit_env, monkeypatch):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        gateway = await unit_env.get(RecordingRealtimeGateway)
        unit_of_work = await unit_env.get(UnitOfWork)
        alice = await make_user(await unit_env.get(UserRepository), "alice")

        async def failing_commit():
            raise RuntimeError("connection lost")

        monkeypatch.setattr(unit_of_work, "_commit", failing_commit)

        # Act
        with pytest.raises(RuntimeError):
            await use_case.execute(
                CreateCommentRequest(content="Hello", author_id=str(alice.id))
            )

        # Assert
        assert gateway.broadcasts == []
