"""Login use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from gate.application.usecase.base import BaseUseCase
from gate.domain.error import CredentialMismatchError
from gate.domain.model import Session
from gate.domain.repository import SessionRepository, UserRepository
from gate.domain.service import PasswordHasher
from gate.domain.value import SessionId
from gate.util.clock import Clock


class LoginRequest(BaseModel):
    """Login request.

    `token` is the bearer token the caller was admitted with.
    """

    email: str
    password: str
    token: str


class LoginResponse(BaseModel):
    """Login response."""

    message: str


class LoginUseCase(BaseUseCase):
    """Use case for checking credentials and recording a session.

    Unknown accounts and wrong passwords fail the same way.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        session_repository: SessionRepository,
        password_hasher: PasswordHasher,
        clock: Clock,
    ) -> None:
        """Initialize login use case.

        Args:
            user_repository: User repository
            session_repository: Session repository
            password_hasher: Password hashing primitive
            clock: Time source
        """
        self.user_repository = user_repository
        self.session_repository = session_repository
        self.password_hasher = password_hasher
        self.clock = clock

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Verify credentials and store a session with the bearer token.

        Args:
            request: Login request

        Returns:
            Confirmation message

        Raises:
            CredentialMismatchError: If the account is unknown or the password
                does not match
        """
        with logfire.span("login.execute", email=request.email):
            user = await self.user_repository.find_by_email(request.email)
            if user is None:
                logfire.info("Login failed", email=request.email)
                raise CredentialMismatchError()

            if not await self.password_hasher.verify(
                user.password_hash, request.password
            ):
                logfire.info("Login failed", email=request.email)
                raise CredentialMismatchError()

            session = Session(
                id=SessionId(uuid4()),
                user_id=user.id,
                token=request.token,
                created_at=self.clock.now(),
            )
            await self.session_repository.save(session)

            logfire.info("Login succeeded", user_id=str(user.id))
            return LoginResponse(message="Login successful")
