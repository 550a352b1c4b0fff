"""Fixtures for end-to-end API tests.

Each test gets a fresh app backed by its own test container, served by a
single TestClient so HTTP requests and WebSocket sessions share one event
loop.
"""

import pytest
from fastapi.testclient import TestClient

from discuss.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client over in-memory persistence and a recording gateway."""
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def realtime_client():
    """Test client with the real WebSocket gateway."""
    app = create_app(build_test_container(unmock={"realtime"}))
    with TestClient(app) as test_client:
        yield test_client
