"""Identity token domain service."""

from datetime import datetime, timedelta, timezone

import logfire

from gate.config import AuthSettings
from gate.domain.error import AuthenticationError
from gate.domain.value import AuthenticationFailureReason, IssuedToken
from gate.util.clock import Clock
from gate.util.error import ConfigurationError
from gate.util.jwt import JWTError, create_token, decode_token

from .base import Service


class TokenService(Service):
    """Domain service for issuing and validating signed identity tokens.

    Tokens are stateless: there is no revocation, a token stays valid until
    its expiry passes.
    """

    def __init__(self, auth_settings: AuthSettings, clock: Clock) -> None:
        """Initialize token service.

        Args:
            auth_settings: Authentication settings holding the signing key
            clock: Time source for issue and expiry checks

        Raises:
            ConfigurationError: If the signing key is empty
        """
        if not auth_settings.jwt_secret:
            raise ConfigurationError("JWT signing key must not be empty")

        self.auth_settings = auth_settings
        self.clock = clock

    @property
    def validity(self) -> timedelta:
        return timedelta(minutes=self.auth_settings.token_expiry_minutes)

    def issue(self, subject: str) -> IssuedToken:
        """Issue a token for a subject.

        Args:
            subject: Email the token vouches for

        Returns:
            Signed token with its issue and expiry instants

        Raises:
            ConfigurationError: If the token cannot be signed
        """
        with logfire.span("token_service.issue", subject=subject):
            issued_at = self.clock.now()
            expires_at = issued_at + self.validity

            try:
                token = create_token(subject, issued_at, expires_at, self.auth_settings)
            except JWTError as e:
                logfire.error("Token signing failed", error=str(e))
                raise ConfigurationError(f"Unable to sign token: {e}") from e

            logfire.info("Token issued", subject=subject, expires_at=expires_at)
            # Claims carry whole seconds
            return IssuedToken(
                token=token,
                subject=subject,
                issued_at=datetime.fromtimestamp(int(issued_at.timestamp()), timezone.utc),
                expires_at=datetime.fromtimestamp(
                    int(expires_at.timestamp()), timezone.utc
                ),
            )

    def validate(self, token: str) -> str:
        """Validate a token and return its subject.

        Args:
            token: Encoded token

        Returns:
            Subject email

        Raises:
            AuthenticationError: If the signature, claims or expiry are invalid
        """
        with logfire.span("token_service.validate"):
            try:
                payload = decode_token(token, self.auth_settings)
            except JWTError as e:
                logfire.info("Token rejected", error=str(e))
                raise AuthenticationError(AuthenticationFailureReason.INVALID_TOKEN)

            if not payload.email:
                logfire.info("Token rejected", error="Empty subject")
                raise AuthenticationError(AuthenticationFailureReason.INVALID_TOKEN)

            if payload.exp <= 0:
                logfire.info("Token rejected", error="Missing expiry")
                raise AuthenticationError(AuthenticationFailureReason.INVALID_TOKEN)

            if self.clock.now().timestamp() >= payload.exp:
                logfire.info("Token rejected", error="Expired", subject=payload.email)
                raise AuthenticationError(AuthenticationFailureReason.EXPIRED_TOKEN)

            return payload.email
