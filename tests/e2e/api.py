"""Helpers for driving the API from end-to-end tests."""

from fastapi.testclient import TestClient

from discuss.util.clock import Clock


def app_clock(client: TestClient) -> Clock:
    """The app's frozen clock."""
    container = client.app.state.dishka_container
    return client.portal.call(container.get, Clock)


def register(client: TestClient, username: str, password: str = "secret123") -> dict:
    """Register a user and return the auth response body."""
    response = client.post(
        "/auth/register",
        json={
            "email": f"{username}@example.com",
            "username": username,
            "password": password,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(auth: dict) -> dict[str, str]:
    return {"Authorization": f"Bearer {auth['access_token']}"}
