"""Registry of open real-time sessions."""

import asyncio
from dataclasses import dataclass
from typing import Any, Protocol
from uuid import uuid4

import logfire

from discuss.adapter.error import RealtimeError
from discuss.domain.value import UserId

# Normal closure; the server is going away
CLOSE_GOING_AWAY = 1001

# Seconds each session gets to acknowledge the shutdown close
CLOSE_TIMEOUT = 5.0


class Transport(Protocol):
    """The part of a WebSocket the registry and gateway use."""

    async def send_json(self, data: Any, mode: str = "text") -> None: ...

    async def close(self, code: int = 1000, reason: str | None = None) -> None: ...


@dataclass(frozen=True)
class Session:
    """One open connection.

    ``user_id`` is None for anonymous viewers, who only receive broadcasts.
    """

    id: str
    user_id: UserId | None
    transport: Transport


class ConnectionRegistry:
    """Process-wide map of users to their open sessions.

    A user may hold several sessions at once (one per browser tab). The
    user's entry is dropped as soon as its last session goes away.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._sessions: dict[str, Session] = {}
        self._user_sessions: dict[UserId, set[str]] = {}
        self._closed = False

    async def add_session(
        self, transport: Transport, user_id: UserId | None = None
    ) -> Session:
        """Register an accepted connection.

        Args:
            transport: The accepted WebSocket
            user_id: Verified identity of the client, None if anonymous

        Returns:
            The new session

        Raises:
            RealtimeError: If the registry has been closed
        """
        async with self._lock:
            if self._closed:
                raise RealtimeError("Connection registry is closed")

            session = Session(id=uuid4().hex, user_id=user_id, transport=transport)
            self._sessions[session.id] = session
            if user_id is not None:
                self._user_sessions.setdefault(user_id, set()).add(session.id)

        logfire.info(
            "Realtime session opened",
            session_id=session.id,
            user_id=str(user_id) if user_id else None,
        )
        return session

    async def remove_session(self, session_id: str) -> None:
        """Forget a session. Unknown ids are ignored."""
        async with self._lock:
            session = self._sessions.pop(session_id, None)
            if session is None:
                return
            if session.user_id is not None:
                user_sessions = self._user_sessions.get(session.user_id)
                if user_sessions is not None:
                    user_sessions.discard(session_id)
                    if not user_sessions:
                        del self._user_sessions[session.user_id]

        logfire.info("Realtime session closed", session_id=session_id)

    async def sessions_for(self, user_id: UserId) -> list[Session]:
        """Sessions registered under one user (empty if none)."""
        async with self._lock:
            return [
                self._sessions[session_id]
                for session_id in self._user_sessions.get(user_id, ())
            ]

    async def all_sessions(self) -> list[Session]:
        """Every open session, anonymous ones included."""
        async with self._lock:
            return list(self._sessions.values())

    async def connected_users(self) -> set[UserId]:
        async with self._lock:
            return set(self._user_sessions)

    async def close(self) -> None:
        """Close every open session and refuse new ones."""
        async with self._lock:
            self._closed = True
            sessions = list(self._sessions.values())
            self._sessions.clear()
            self._user_sessions.clear()

        await asyncio.gather(*(self._close_session(session) for session in sessions))
        logfire.info("Connection registry closed", closed_sessions=len(sessions))

    async def _close_session(self, session: Session) -> None:
        try:
            await asyncio.wait_for(
                session.transport.close(code=CLOSE_GOING_AWAY), timeout=CLOSE_TIMEOUT
            )
        except Exception as e:
            logfire.debug(
                "Session already gone at shutdown", session_id=session.id, error=repr(e)
            )
