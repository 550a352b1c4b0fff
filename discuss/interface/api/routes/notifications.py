"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from discuss.application.usecase.notification import (
    GetNotificationsRequest,
    GetNotificationsResponse,
    GetNotificationsUseCase,
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadResponse,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadResponse,
    MarkNotificationReadUseCase,
)
from discuss.domain.service import JWTService
from discuss.interface.api.security import bearer_token, require_user_id
from discuss.interface.error import to_http_exception

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=GetNotificationsResponse)
async def get_notifications(
    get_notifications_use_case: FromDishka[GetNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> GetNotificationsResponse:
    """List the caller's notifications, newest first."""
    user_id = require_user_id(jwt_service, token, "view notifications")
    return await get_notifications_use_case.execute(
        GetNotificationsRequest(user_id=str(user_id))
    )


@router.get("/unread-count", response_model=GetUnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> GetUnreadCountResponse:
    """Number of unread notifications, for the notification badge."""
    user_id = require_user_id(jwt_service, token, "view notifications")
    return await get_unread_count_use_case.execute(
        GetUnreadCountRequest(user_id=str(user_id))
    )


@router.post("/mark-all-read", response_model=MarkAllNotificationsReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> MarkAllNotificationsReadResponse:
    """Mark every unread notification read."""
    user_id = require_user_id(jwt_service, token, "update notifications")
    return await mark_all_read_use_case.execute(
        MarkAllNotificationsReadRequest(user_id=str(user_id))
    )


@router.post("/{notification_id}/read", response_model=MarkNotificationReadResponse)
async def mark_read(
    notification_id: str,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> MarkNotificationReadResponse:
    """Mark one notification read.

    Raises:
        HTTPException: 404 if the notification does not belong to the caller
    """
    user_id = require_user_id(jwt_service, token, "update notifications")

    try:
        return await mark_read_use_case.execute(
            MarkNotificationReadRequest(
                notification_id=notification_id, user_id=str(user_id)
            )
        )
    except Exception as e:
        raise to_http_exception(e, "mark notification read") from e
