"""Real-time adapter (WebSocket sessions and fan-out)."""

from .gateway import RecordingRealtimeGateway, WebSocketGateway, encode_message
from .registry import ConnectionRegistry, Session, Transport

__all__ = [
    "ConnectionRegistry",
    "RecordingRealtimeGateway",
    "Session",
    "Transport",
    "WebSocketGateway",
    "encode_message",
]
