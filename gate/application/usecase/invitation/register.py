"""Register use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from gate.application.usecase.base import BaseUseCase
from gate.domain.error import AccountExistsError
from gate.domain.model import User
from gate.domain.repository import UserRepository
from gate.domain.service import InvitationService, PasswordHasher
from gate.domain.value import Email, InvitationCode, UserId
from gate.util.clock import Clock

# bcrypt rejects passwords longer than this
MAX_PASSWORD_BYTES = 72


class RegisterRequest(BaseModel):
    """Register request."""

    email: str
    password: str
    code: str


class RegisterResponse(BaseModel):
    """Register response. Never echoes the password."""

    email: str
    message: str


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account with an invitation code.

    Consuming the code and inserting the user run in the same request-scoped
    transaction. The code is consumed before the account lookup, so a caller
    without a valid code learns nothing about which emails are registered.
    When the account already exists, the raised error rolls the transaction
    back and the code stays unused.
    """

    def __init__(
        self,
        invitation_service: InvitationService,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        clock: Clock,
    ) -> None:
        """Initialize register use case.

        Args:
            invitation_service: Invitation domain service
            user_repository: User repository
            password_hasher: Password hashing primitive
            clock: Time source
        """
        self.invitation_service = invitation_service
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.clock = clock

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Register a new account.

        Args:
            request: Registration request

        Returns:
            Registered email and a confirmation message

        Raises:
            ValueError: If the email, password or code is blank, or the
                password is longer than bcrypt accepts
            InvitationInvalidError: If the code cannot be consumed
            AccountExistsError: If the email already has an account
        """
        email = Email(request.email).root
        code = InvitationCode(request.code)
        if not request.password:
            raise ValueError("Password must not be empty")
        if len(request.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must not exceed {MAX_PASSWORD_BYTES} bytes")

        with logfire.span(
            "register.execute", email=email, code=code.redacted() + "..."
        ):
            password_hash = await self.password_hasher.hash(request.password)

            await self.invitation_service.consume(code, email)

            if await self.user_repository.find_by_email(email) is not None:
                logfire.warn("Registration for existing account", email=email)
                raise AccountExistsError(email)

            user = User(
                id=UserId(uuid4()),
                email=email,
                password_hash=password_hash,
                created_at=self.clock.now(),
            )
            await self.user_repository.save(user)

            logfire.info("User registered", user_id=str(user.id), email=email)
            return RegisterResponse(email=email, message="User registered successfully")
