"""End-to-end tests for the comment API."""

from uuid import uuid4

from discuss.adapter.realtime import RecordingRealtimeGateway
from tests.e2e.api import app_clock, auth_headers, register


def _post(client, auth, content, parent_id=None):
    response = client.post(
        "/comments",
        json={"content": content, "parent_id": parent_id},
        headers=auth_headers(auth),
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestCommentAuth:
    def test_every_comment_route_requires_a_token(self, client):
        comment_id = str(uuid4())

        responses = [
            client.get("/comments"),
            client.post("/comments", json={"content": "Hi"}),
            client.put(f"/comments/{comment_id}", json={"content": "Hi"}),
            client.delete(f"/comments/{comment_id}"),
            client.post(f"/comments/{comment_id}/restore"),
            client.post("/comments/cleanup/expired"),
        ]

        assert [r.status_code for r in responses] == [401] * 6

    def test_invalid_token_rejected(self, client):
        response = client.get(
            "/comments", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401


class TestCommentThread:
    def test_post_reply_and_read_tree(self, client):
        # Arrange
        alice = register(client, "alice")
        bob = register(client, "bob")
        clock = app_clock(client)

        # Act
        root = _post(client, alice, "What do you think?")
        clock.advance(seconds=1)
        reply = _post(client, bob, "Looks good", parent_id=root["id"])
        clock.advance(seconds=1)
        newer = _post(client, bob, "Separate topic")

        response = client.get("/comments", headers=auth_headers(alice))

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert [c["id"] for c in body["comments"]] == [newer["id"], root["id"]]
        root_item = body["comments"][1]
        assert root_item["username"] == "alice"
        assert root_item["can_edit"] is True
        assert [r["id"] for r in root_item["replies"]] == [reply["id"]]
        assert root_item["replies"][0]["parent_id"] == root["id"]
        assert root_item["replies"][0]["replies"] == []

    def test_new_comment_is_broadcast(self, client):
        alice = register(client, "alice")
        gateway = client.portal.call(
            client.app.state.dishka_container.get, RecordingRealtimeGateway
        )

        comment = _post(client, alice, "Hello")

        assert gateway.broadcasts[-1] == {
            "event": "comment:new",
            "data": {
                "id": comment["id"],
                "content": "Hello",
                "parent_id": None,
                "user_id": alice["user"]["id"],
                "username": "alice",
                "created_at": comment["created_at"],
                "updated_at": comment["updated_at"],
            },
        }

    def test_reply_to_missing_parent(self, client):
        alice = register(client, "alice")

        response = client.post(
            "/comments",
            json={"content": "Hi", "parent_id": str(uuid4())},
            headers=auth_headers(alice),
        )

        assert response.status_code == 404

    def test_malformed_parent_id(self, client):
        alice = register(client, "alice")

        response = client.post(
            "/comments",
            json={"content": "Hi", "parent_id": "123"},
            headers=auth_headers(alice),
        )

        assert response.status_code == 400

    def test_empty_content_rejected(self, client):
        alice = register(client, "alice")

        response = client.post(
            "/comments", json={"content": ""}, headers=auth_headers(alice)
        )

        assert response.status_code == 422


class TestEditWindow:
    def test_edit_then_window_closes(self, client):
        alice = register(client, "alice")
        clock = app_clock(client)
        comment = _post(client, alice, "Draft")

        clock.advance(minutes=10)
        edited = client.put(
            f"/comments/{comment['id']}",
            json={"content": "Final"},
            headers=auth_headers(alice),
        )
        assert edited.status_code == 200
        assert edited.json()["content"] == "Final"

        clock.advance(minutes=10)
        late = client.put(
            f"/comments/{comment['id']}",
            json={"content": "Too late"},
            headers=auth_headers(alice),
        )
        assert late.status_code == 409
        assert late.json()["detail"] == "Edit window expired"

        tree = client.get("/comments", headers=auth_headers(alice)).json()
        assert tree["comments"][0]["can_edit"] is False

    def test_edit_by_someone_else(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        comment = _post(client, alice, "Mine")

        response = client.put(
            f"/comments/{comment['id']}",
            json={"content": "Mine now"},
            headers=auth_headers(bob),
        )

        assert response.status_code == 403

    def test_edit_missing_comment(self, client):
        alice = register(client, "alice")

        response = client.put(
            f"/comments/{uuid4()}",
            json={"content": "Hi"},
            headers=auth_headers(alice),
        )

        assert response.status_code == 404


class TestDeleteRestorePurge:
    def test_delete_restore_cycle(self, client):
        # Arrange
        alice = register(client, "alice")
        clock = app_clock(client)
        comment = _post(client, alice, "Oops")

        # Act - delete at T0+20
        clock.advance(minutes=20)
        deleted = client.delete(
            f"/comments/{comment['id']}", headers=auth_headers(alice)
        )

        # Assert - still listed, flagged
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Comment deleted successfully"
        listed = client.get("/comments", headers=auth_headers(alice)).json()
        assert listed["comments"][0]["is_deleted"] is True
        assert listed["comments"][0]["deleted_at"] is not None

        # Act - restore at T0+30
        clock.advance(minutes=10)
        restored = client.post(
            f"/comments/{comment['id']}/restore", headers=auth_headers(alice)
        )

        # Assert
        assert restored.status_code == 200
        assert restored.json()["is_deleted"] is False
        assert restored.json()["content"] == "Oops"

    def test_restore_after_window(self, client):
        alice = register(client, "alice")
        clock = app_clock(client)
        comment = _post(client, alice, "Oops")
        client.delete(f"/comments/{comment['id']}", headers=auth_headers(alice))

        clock.advance(minutes=16)
        response = client.post(
            f"/comments/{comment['id']}/restore", headers=auth_headers(alice)
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "Restore window expired"

    def test_restore_by_someone_else(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        comment = _post(client, alice, "Oops")
        client.delete(f"/comments/{comment['id']}", headers=auth_headers(alice))

        response = client.post(
            f"/comments/{comment['id']}/restore", headers=auth_headers(bob)
        )

        assert response.status_code == 403

    def test_restore_live_comment(self, client):
        alice = register(client, "alice")
        comment = _post(client, alice, "Fine")

        response = client.post(
            f"/comments/{comment['id']}/restore", headers=auth_headers(alice)
        )

        assert response.status_code == 404

    def test_purge_removes_comment_and_detaches_replies(self, client):
        """Deleted at T0+20 and never restored; purged at T0+40."""
        # Arrange
        alice = register(client, "alice")
        bob = register(client, "bob")
        clock = app_clock(client)
        root = _post(client, alice, "Root")
        reply = _post(client, bob, "Reply", parent_id=root["id"])
        clock.advance(minutes=20)
        client.delete(f"/comments/{root['id']}", headers=auth_headers(alice))

        # Act
        clock.advance(minutes=20)
        purge = client.post("/comments/cleanup/expired", headers=auth_headers(bob))
        again = client.post("/comments/cleanup/expired", headers=auth_headers(bob))

        # Assert
        assert purge.status_code == 200
        assert purge.json() == {"deleted_count": 1}
        assert again.json() == {"deleted_count": 0}
        tree = client.get("/comments", headers=auth_headers(alice)).json()
        assert [c["id"] for c in tree["comments"]] == [reply["id"]]
        assert tree["comments"][0]["parent_id"] is None

        restore = client.post(
            f"/comments/{root['id']}/restore", headers=auth_headers(alice)
        )
        assert restore.status_code == 404
