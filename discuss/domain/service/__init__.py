"""Domain services."""

from .comment_service import CommentNode, CommentService
from .fanout_service import FanoutService, RealtimeGateway
from .jwt_service import JWTService
from .notification_service import NotificationService
from .user_service import UserService

__all__ = [
    "CommentNode",
    "CommentService",
    "FanoutService",
    "JWTService",
    "NotificationService",
    "RealtimeGateway",
    "UserService",
]
