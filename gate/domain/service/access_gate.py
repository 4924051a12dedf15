"""Request admission for protected operations."""

import logfire

from gate.domain.error import AuthenticationError, RateLimitedError
from gate.domain.value import Admission, AuthenticationFailureReason
from gate.util.logging import get_logger

from .base import Service
from .rate_limiter import RateLimiter
from .token_service import TokenService

audit_logger = get_logger("gate.audit")

BEARER_SCHEME = "bearer"


def parse_bearer(authorization: str | None) -> str:
    """Extract the token from an Authorization header value.

    Args:
        authorization: Raw header value, if any

    Returns:
        The bearer token

    Raises:
        AuthenticationError: If the header is missing or not "Bearer <token>"
    """
    if authorization is None or not authorization.strip():
        raise AuthenticationError(AuthenticationFailureReason.MISSING_HEADER)

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME or not parts[1]:
        raise AuthenticationError(AuthenticationFailureReason.MALFORMED_HEADER)

    return parts[1]


class AccessGate(Service):
    """Composes the rate limiter and token validation into one admission step.

    A request is rate checked first (when the operation is rate limited), then
    its bearer token is validated. Every decision goes to the audit log with
    the client identity; tokens are never logged.
    """

    def __init__(self, token_service: TokenService, rate_limiter: RateLimiter) -> None:
        """Initialize access gate.

        Args:
            token_service: Token validation
            rate_limiter: Shared per-identity rate limiter
        """
        self.token_service = token_service
        self.rate_limiter = rate_limiter

    def admit(
        self, identity: str, authorization: str | None, rate_limited: bool = False
    ) -> Admission:
        """Decide whether a request may proceed.

        Args:
            identity: Client identity (remote address)
            authorization: Raw Authorization header value
            rate_limited: Whether the operation is guarded by the rate limiter

        Returns:
            Admission carrying the authenticated subject

        Raises:
            RateLimitedError: If the identity's bucket is empty
            AuthenticationError: If the bearer token is missing or invalid
        """
        with logfire.span(
            "access_gate.admit", identity=identity, rate_limited=rate_limited
        ):
            if rate_limited:
                decision = self.rate_limiter.try_acquire(identity)
                if not decision.admitted:
                    audit_logger.warning(
                        "Request rejected: reason=rate_limited identity=%s retry_after=%.2f",
                        identity,
                        decision.retry_after,
                    )
                    raise RateLimitedError(identity, decision.retry_after)

            try:
                token = parse_bearer(authorization)
                subject = self.token_service.validate(token)
            except AuthenticationError as e:
                audit_logger.warning(
                    "Request rejected: reason=%s identity=%s",
                    e.reason.value,
                    identity,
                )
                raise

            audit_logger.info(
                "Request admitted: subject=%s identity=%s", subject, identity
            )
            return Admission(subject=subject, identity=identity)
