"""WebSocket implementation of the real-time gateway."""

import asyncio
from typing import Any

import logfire

from discuss.domain.service import RealtimeGateway
from discuss.domain.value import RealtimeEvent, UserId

from .registry import ConnectionRegistry, Session


def encode_message(event: RealtimeEvent, payload: dict[str, Any]) -> dict[str, Any]:
    """Wire format of an outbound event."""
    return {"event": event.value, "data": payload}


class WebSocketGateway(RealtimeGateway):
    """Pushes events to sessions held in a ConnectionRegistry.

    Sessions are written to concurrently, each send bounded by
    ``send_timeout`` seconds. A session whose send fails or times out is
    dropped from the registry; the failure is logged and never reaches the
    caller.
    """

    def __init__(self, registry: ConnectionRegistry, send_timeout: float = 5.0) -> None:
        """Initialize gateway.

        Args:
            registry: Open sessions
            send_timeout: Seconds a single session may take to accept a message
        """
        self.registry = registry
        self.send_timeout = send_timeout

    async def broadcast(self, event: RealtimeEvent, payload: dict[str, Any]) -> int:
        sessions = await self.registry.all_sessions()
        return await self._send(sessions, encode_message(event, payload))

    async def send_to_user(
        self, user_id: UserId, event: RealtimeEvent, payload: dict[str, Any]
    ) -> int:
        sessions = await self.registry.sessions_for(user_id)
        if not sessions:
            logfire.debug("No open sessions for user", user_id=str(user_id))
            return 0
        return await self._send(sessions, encode_message(event, payload))

    async def _send(self, sessions: list[Session], message: dict[str, Any]) -> int:
        results = await asyncio.gather(
            *(self._send_one(session, message) for session in sessions)
        )
        return sum(results)

    async def _send_one(self, session: Session, message: dict[str, Any]) -> bool:
        try:
            await asyncio.wait_for(
                session.transport.send_json(message), timeout=self.send_timeout
            )
            return True
        except Exception as e:
            logfire.warn(
                "Realtime send failed, dropping session",
                session_id=session.id,
                error=repr(e),
            )
            await self.registry.remove_session(session.id)
            return False


class RecordingRealtimeGateway(RealtimeGateway):
    """Gateway for testing.

    Records every event instead of sending it. ``connected`` controls how
    many sessions each call reports as reached.
    """

    def __init__(self, connected: int = 1) -> None:
        self.connected = connected
        self.broadcasts: list[dict[str, Any]] = []
        self.direct: list[tuple[UserId, dict[str, Any]]] = []

    async def broadcast(self, event: RealtimeEvent, payload: dict[str, Any]) -> int:
        self.broadcasts.append(encode_message(event, payload))
        return self.connected

    async def send_to_user(
        self, user_id: UserId, event: RealtimeEvent, payload: dict[str, Any]
    ) -> int:
        self.direct.append((user_id, encode_message(event, payload)))
        return self.connected

    def sent_to(self, user_id: UserId) -> list[dict[str, Any]]:
        """Messages pushed to one user."""
        return [message for recipient, message in self.direct if recipient == user_id]
