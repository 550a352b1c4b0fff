"""Real-time infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from discuss.adapter.realtime import ConnectionRegistry, WebSocketGateway
from discuss.config import RealtimeSettings
from discuss.domain.service import RealtimeGateway
from discuss.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Real-time component base."""

    __mock_component__ = "realtime"


class ProdRealtimeProvider(RealtimeProvider):
    """WebSocket fan-out over one process-wide connection registry."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_registry(self) -> AsyncIterator[ConnectionRegistry]:
        """Provide the connection registry, closed when the container closes."""
        registry = ConnectionRegistry()
        yield registry
        await registry.close()

    @provide(scope=Scope.APP)
    def get_gateway(
        self, registry: ConnectionRegistry, settings: RealtimeSettings
    ) -> RealtimeGateway:
        """Provide the WebSocket gateway."""
        return WebSocketGateway(registry, send_timeout=settings.send_timeout_seconds)
