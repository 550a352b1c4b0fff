"""Core DI providers."""

from dishka import Scope, provide

from discuss.config import (
    AuthSettings,
    CommentSettings,
    RealtimeSettings,
    ReaperSettings,
    Settings,
)
from discuss.util.clock import Clock
from discuss.util.di.base import ProviderBase
from discuss.util.error import ConfigurationError

DEFAULT_JWT_SECRET = AuthSettings().jwt_secret


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with the default JWT secret
        """
        settings = Settings()
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
        ):
            raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment lifecycle settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_reaper_settings(self, settings: Settings) -> ReaperSettings:
        """Provide reaper settings."""
        return settings.reaper

    @provide(scope=Scope.APP)
    def provide_realtime_settings(self, settings: Settings) -> RealtimeSettings:
        """Provide real-time fan-out settings."""
        return settings.realtime


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Wall clock."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        """Provide the system clock."""
        return Clock()
