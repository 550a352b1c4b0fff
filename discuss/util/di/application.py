"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from discuss.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    PurgeExpiredCommentsUseCase,
    RestoreCommentUseCase,
    UpdateCommentUseCase,
)
from discuss.application.usecase.notification import (
    GetNotificationsUseCase,
    GetUnreadCountUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from discuss.config import AuthSettings
from discuss.domain.repository import UnitOfWork
from discuss.domain.service import (
    CommentService,
    FanoutService,
    JWTService,
    NotificationService,
    UserService,
)
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            user_service=user_service,
            jwt_service=jwt_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        notification_service: NotificationService,
        fanout_service: FanoutService,
        unit_of_work: UnitOfWork,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            notification_service=notification_service,
            fanout_service=fanout_service,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_restore_comment_use_case(
        self, comment_service: CommentService
    ) -> RestoreCommentUseCase:
        """Provide restore comment use case."""
        return RestoreCommentUseCase(comment_service=comment_service)

    @provide
    def get_purge_expired_use_case(
        self, comment_service: CommentService
    ) -> PurgeExpiredCommentsUseCase:
        """Provide purge expired comments use case."""
        return PurgeExpiredCommentsUseCase(comment_service=comment_service)

    # Notification use cases
    @provide
    def get_get_notifications_use_case(
        self, notification_service: NotificationService
    ) -> GetNotificationsUseCase:
        """Provide get notifications use case."""
        return GetNotificationsUseCase(notification_service=notification_service)

    @provide
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )

    @provide
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        """Provide unread notification count use case."""
        return GetUnreadCountUseCase(notification_service=notification_service)
