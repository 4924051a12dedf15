"""Application layer DI providers."""

from dishka import Scope, provide

from gate.application.usecase.auth import IssueTokenUseCase, LoginUseCase
from gate.application.usecase.invitation import (
    IssueInvitationUseCase,
    RegisterUseCase,
)
from gate.domain.repository import SessionRepository, UserRepository
from gate.domain.service import InvitationService, PasswordHasher, TokenService
from gate.util.clock import Clock
from gate.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_issue_token_use_case(self, token_service: TokenService) -> IssueTokenUseCase:
        """Provide issue token use case."""
        return IssueTokenUseCase(token_service=token_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        user_repository: UserRepository,
        session_repository: SessionRepository,
        password_hasher: PasswordHasher,
        clock: Clock,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_repository=user_repository,
            session_repository=session_repository,
            password_hasher=password_hasher,
            clock=clock,
        )

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_issue_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> IssueInvitationUseCase:
        """Provide issue invitation use case."""
        return IssueInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self,
        invitation_service: InvitationService,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        clock: Clock,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            invitation_service=invitation_service,
            user_repository=user_repository,
            password_hasher=password_hasher,
            clock=clock,
        )
