"""JWT token utilities."""

from datetime import datetime

import jwt
from pydantic import BaseModel, ValidationError

from gate.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    email: str
    iat: int
    exp: int


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    email: str, issued_at: datetime, expires_at: datetime, settings: AuthSettings
) -> str:
    """Create a signed JWT for the subject.

    Args:
        email: Subject identity
        issued_at: Issue instant
        expires_at: Expiry instant
        settings: Authentication settings

    Returns:
        Encoded JWT token

    Raises:
        JWTError: If the token cannot be signed with the configured key
    """
    payload = {
        "email": email,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }

    try:
        return jwt.encode(
            payload, settings.jwt_secret, algorithm=settings.jwt_algorithm
        )
    except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
        raise JWTError(f"Signing failed: {e}")


def decode_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify the signature of a JWT and decode its claims.

    Time-based claims are only checked for presence here; the caller compares
    them against its own clock.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if the signature is valid

    Raises:
        JWTError: If the token is malformed, unsigned by our key or lacks claims
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={
                "verify_exp": False,
                "verify_iat": False,
                "require": ["email", "iat", "exp"],
            },
        )
        return TokenPayload(**payload)
    except jwt.MissingRequiredClaimError as e:
        raise JWTError(f"Missing claim: {e.claim}")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValidationError:
        raise JWTError("Malformed claims")
