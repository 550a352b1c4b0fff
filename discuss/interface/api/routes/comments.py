"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    PurgeExpiredCommentsRequest,
    PurgeExpiredCommentsResponse,
    PurgeExpiredCommentsUseCase,
    RestoreCommentRequest,
    RestoreCommentResponse,
    RestoreCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from discuss.domain.service import JWTService
from discuss.interface.api.security import bearer_token, require_user_id
from discuss.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=10000)


@router.get("", response_model=GetCommentsResponse)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> GetCommentsResponse:
    """Get the whole discussion as a tree.

    Top-level comments newest first, replies oldest first at every depth.
    Soft-deleted comments are included with ``is_deleted`` set.
    """
    require_user_id(jwt_service, token, "view comments")
    return await get_comments_use_case.execute(GetCommentsRequest())


@router.post(
    "", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> CreateCommentResponse:
    """Post a top-level comment or reply to another comment.

    Connected clients receive a ``comment:new`` event; the parent's author
    gets a notification when someone else replies.

    Raises:
        HTTPException: If not authenticated or the parent does not exist
    """
    user_id = require_user_id(jwt_service, token, "create comments")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                content=request.content,
                author_id=str(user_id),
                parent_id=request.parent_id,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create comment") from e


@router.put("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> UpdateCommentResponse:
    """Edit a comment's content.

    Only the author can edit, and only within the edit window.

    Raises:
        HTTPException: 403 if not the author, 404 if missing or deleted,
            409 if the edit window has expired
    """
    user_id = require_user_id(jwt_service, token, "edit comments")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id, user_id=str(user_id), content=request.content
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update comment") from e


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> DeleteCommentResponse:
    """Soft-delete a comment. It can be restored within the restore window."""
    user_id = require_user_id(jwt_service, token, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=str(user_id))
        )
    except Exception as e:
        raise to_http_exception(e, "delete comment") from e


@router.post("/{comment_id}/restore", response_model=RestoreCommentResponse)
async def restore_comment(
    comment_id: str,
    restore_comment_use_case: FromDishka[RestoreCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> RestoreCommentResponse:
    """Undo a soft delete.

    Raises:
        HTTPException: 403 if not the author, 404 if not deleted or already
            purged, 409 if the restore window has expired
    """
    user_id = require_user_id(jwt_service, token, "restore comments")

    try:
        return await restore_comment_use_case.execute(
            RestoreCommentRequest(comment_id=comment_id, user_id=str(user_id))
        )
    except Exception as e:
        raise to_http_exception(e, "restore comment") from e


@router.post("/cleanup/expired", response_model=PurgeExpiredCommentsResponse)
async def purge_expired_comments(
    purge_use_case: FromDishka[PurgeExpiredCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> PurgeExpiredCommentsResponse:
    """Run the expired-comment purge now instead of waiting for the reaper."""
    require_user_id(jwt_service, token, "purge comments")
    return await purge_use_case.execute(PurgeExpiredCommentsRequest())
