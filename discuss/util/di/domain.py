"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from discuss.config import AuthSettings, CommentSettings
from discuss.domain.repository import (
    CommentRepository,
    NotificationRepository,
    UnitOfWork,
    UserRepository,
)
from discuss.domain.service import (
    CommentService,
    FanoutService,
    JWTService,
    NotificationService,
    RealtimeGateway,
    UserService,
)
from discuss.util.clock import Clock
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, clock: Clock
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, clock=clock)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        clock: Clock,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service with configured windows."""
        return CommentService(
            comment_repository=comment_repository,
            user_repository=user_repository,
            clock=clock,
            edit_window=timedelta(minutes=comment_settings.edit_window_minutes),
            restore_window=timedelta(minutes=comment_settings.restore_window_minutes),
            max_thread_depth=comment_settings.max_thread_depth,
        )

    @provide
    def get_fanout_service(self, gateway: RealtimeGateway) -> FanoutService:
        """Provide real-time fan-out domain service."""
        return FanoutService(gateway=gateway)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        fanout_service: FanoutService,
        unit_of_work: UnitOfWork,
        clock: Clock,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            fanout_service=fanout_service,
            unit_of_work=unit_of_work,
            clock=clock,
        )
