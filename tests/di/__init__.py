"""Mock providers for testing."""

from .clock import T0, FrozenClock, MockClockProvider
from .persistence import MockPersistenceProvider
from .realtime import MockRealtimeProvider
from .container import build_test_container

__all__ = [
    "T0",
    "FrozenClock",
    "MockClockProvider",
    "MockPersistenceProvider",
    "MockRealtimeProvider",
    "build_test_container",
]
