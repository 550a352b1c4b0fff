"""Comment use cases."""

from .create_comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import (
    CommentItem,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from .purge_expired import (
    PurgeExpiredCommentsRequest,
    PurgeExpiredCommentsResponse,
    PurgeExpiredCommentsUseCase,
)
from .restore_comment import (
    RestoreCommentRequest,
    RestoreCommentResponse,
    RestoreCommentUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CommentResponse",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "PurgeExpiredCommentsRequest",
    "PurgeExpiredCommentsResponse",
    "PurgeExpiredCommentsUseCase",
    "RestoreCommentRequest",
    "RestoreCommentResponse",
    "RestoreCommentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
