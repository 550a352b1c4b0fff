"""Real-time WebSocket route."""

import logfire
from dishka import AsyncContainer
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from discuss.adapter.error import RealtimeError
from discuss.adapter.realtime import ConnectionRegistry
from discuss.domain.service import JWTService
from discuss.domain.value import UserId
from discuss.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["realtime"])


async def _identify(container: AsyncContainer, token: str) -> UserId | None:
    """Resolve the user behind a token, None if the token is not valid."""
    async with container() as request_container:
        jwt_service = await request_container.get(JWTService)
        return jwt_service.get_user_id(token)


@router.websocket("/ws")
async def realtime_channel(websocket: WebSocket, token: str | None = None) -> None:
    """Push channel for ``comment:new`` and ``notification`` events.

    Query parameters:
    - token: access token from login. Without it the session is anonymous
      and only receives broadcasts; an invalid token is rejected.

    Messages are JSON objects ``{"event": ..., "data": ...}``. Clients send
    nothing except an optional ``ping`` text frame, answered with ``pong``.
    """
    container: AsyncContainer = websocket.app.state.dishka_container

    user_id = None
    if token:
        user_id = await _identify(container, token)
        if user_id is None:
            logfire.warn("Realtime connection with invalid token")
            await websocket.close(
                code=status.WS_1008_POLICY_VIOLATION, reason="Invalid token"
            )
            return

    registry = await container.get(ConnectionRegistry)
    await websocket.accept()
    try:
        session = await registry.add_session(websocket, user_id)
    except RealtimeError as e:
        logfire.warn("Realtime connection refused", error=str(e))
        await websocket.close(code=status.WS_1013_TRY_AGAIN_LATER)
        return

    logger.debug("Realtime session %s opened (user=%s)", session.id, user_id)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            # Binary frames are ignored
            if message.get("text") == "ping":
                await websocket.send_text("pong")
    except WebSocketDisconnect:
        pass
    finally:
        await registry.remove_session(session.id)
        logger.debug("Realtime session %s closed", session.id)
