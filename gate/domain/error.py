"""Domain layer errors."""

from gate.domain.value.types import AuthenticationFailureReason, InvitationRejection


class DomainError(Exception):
    """Base domain error."""

    pass


class AuthenticationError(DomainError):
    """Raised when a request cannot be authenticated.

    The reason is kept for audit logs only; every reason maps to the same
    response body.
    """

    def __init__(self, reason: AuthenticationFailureReason):
        self.reason = reason
        super().__init__(f"Authentication failed: {reason.value}")


class RateLimitedError(DomainError):
    """Raised when a client identity has exhausted its token bucket."""

    def __init__(self, identity: str, retry_after: float):
        self.identity = identity
        self.retry_after = retry_after
        super().__init__(f"Rate limit exceeded for {identity}")


class InvitationInvalidError(DomainError):
    """Raised when an invitation code cannot be consumed."""

    def __init__(self, reason: InvitationRejection):
        self.reason = reason
        super().__init__(f"Invitation rejected: {reason.value}")


class CredentialMismatchError(DomainError):
    """Raised when an email/password pair does not match a stored account.

    Unknown accounts and wrong passwords are deliberately indistinguishable.
    """

    def __init__(self):
        super().__init__("Invalid credentials")


class AccountExistsError(DomainError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Account already exists: {email}")
