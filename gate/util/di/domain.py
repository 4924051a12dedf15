"""Domain layer DI providers."""

from dishka import Scope, provide

from gate.config import AuthSettings, InvitationSettings, RateLimitSettings
from gate.domain.repository import InvitationRepository
from gate.domain.service import (
    AccessGate,
    InvitationService,
    RateLimiter,
    TokenService,
)
from gate.util.clock import Clock
from gate.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session
    lifecycle. The rate limiter holds state for every client and is shared
    across requests (APP scope).
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_rate_limiter(self, settings: RateLimitSettings, clock: Clock) -> RateLimiter:
        """Provide the shared rate limiter."""
        return RateLimiter(settings=settings, clock=clock)

    @provide
    def get_token_service(self, auth_settings: AuthSettings, clock: Clock) -> TokenService:
        """Provide token domain service."""
        return TokenService(auth_settings=auth_settings, clock=clock)

    @provide
    def get_access_gate(
        self, token_service: TokenService, rate_limiter: RateLimiter
    ) -> AccessGate:
        """Provide access gate."""
        return AccessGate(token_service=token_service, rate_limiter=rate_limiter)

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        invitation_settings: InvitationSettings,
        clock: Clock,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            invitation_settings=invitation_settings,
            clock=clock,
        )
