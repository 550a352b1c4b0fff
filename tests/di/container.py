"""Test container builder with selective unmocking."""

from dishka import AsyncContainer

from discuss.util.di import Component, build_container, mockable_components

# Registers the mock subclasses of the mockable providers
from . import clock, persistence, realtime  # noqa: F401


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked.

    Settings come from the environment (``ENVIRONMENT=test`` is set in
    conftest).

    Args:
        unmock: Components to run with their production implementation,
            e.g. ``{"realtime"}`` for real WebSocket fan-out or
            ``{"persistence"}`` for Postgres.

    Raises:
        ValueError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")
    return build_container(mocked=mockable_components() - unmock)
