"""Dependency injection wiring.

Every provider the application needs is listed in ``PROVIDERS``. Mockable
components (clock, persistence, realtime) register a production and a mock
subclass; ``build_container`` picks one per component.
"""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from discuss.util.di.application import ProdApplicationProvider
from discuss.util.di.base import Component, ProviderBase
from discuss.util.di.core import ClockProvider, ProdClockProvider, ProdConfigProvider
from discuss.util.di.domain import ProdDomainProvider
from discuss.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdRealtimeProvider,
    RealtimeProvider,
)

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    ClockProvider,
    PersistenceProvider,
    RealtimeProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_mockable() and base.__mock_component__
    }


def build_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the application container.

    Settings are read from the environment by ``ProdConfigProvider``.

    Args:
        mocked: Components to replace with their mock implementation.
            Empty for production.

    Raises:
        ValueError: If ``mocked`` names an unknown component
    """
    unknown = set(mocked) - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        base.implementation(use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


__all__ = [
    "PROVIDERS",
    "ClockProvider",
    "Component",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdClockProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProdRealtimeProvider",
    "ProviderBase",
    "RealtimeProvider",
    "build_container",
    "mockable_components",
]
