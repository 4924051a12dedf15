"""Domain value objects for the authentication gate.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime
from enum import Enum

from pydantic import field_validator

from gate.domain.value.common import RootValueObject, ValueObject


class AuthenticationFailureReason(str, Enum):
    """Why a request failed authentication.

    Recorded in the audit log; never exposed to the client.
    """

    MISSING_HEADER = "missing_header"
    MALFORMED_HEADER = "malformed_header"
    INVALID_TOKEN = "invalid_token"
    EXPIRED_TOKEN = "expired_token"


class InvitationRejection(str, Enum):
    """Why an invitation code was rejected, in order of precedence."""

    NOT_FOUND = "not_found"
    ALREADY_USED = "already_used"
    EXPIRED = "expired"


class Email(RootValueObject[str]):
    """Email address used as the subject of tokens and accounts.

    Surrounding whitespace is stripped; the address is otherwise kept as given.
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate the address is present and roughly well formed."""
        v = v.strip()
        if not v:
            raise ValueError("Email must not be empty")
        if len(v) > 320:
            raise ValueError("Email must be at most 320 characters")
        return v


class InvitationCode(RootValueObject[str]):
    """Opaque URL-safe invitation code."""

    @field_validator("root")
    @classmethod
    def validate_code(cls, v: str) -> str:
        """Validate code is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Invitation code must be 1-255 characters")
        return v

    def redacted(self) -> str:
        """Return a prefix of the code that is safe to log."""
        return self.root[:8]


class IssuedToken(ValueObject):
    """A freshly signed identity token."""

    token: str
    subject: str
    issued_at: datetime
    expires_at: datetime


class RateDecision(ValueObject):
    """Outcome of a rate limiter acquisition."""

    admitted: bool
    remaining: float
    retry_after: float = 0.0  # Seconds until enough tokens are available


class Admission(ValueObject):
    """A request that passed the access gate."""

    subject: str
    identity: str
