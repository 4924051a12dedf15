"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from gate.config import (
    AuthSettings,
    InvitationSettings,
    RateLimitSettings,
    Settings,
    SweeperSettings,
)
from gate.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations

    @provide(scope=Scope.APP)
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        """Provide rate limit settings."""
        return settings.rate_limit

    @provide(scope=Scope.APP)
    def provide_sweeper_settings(self, settings: Settings) -> SweeperSettings:
        """Provide sweeper settings."""
        return settings.sweeper
