"""Access gate integration for protected routes."""

from fastapi import Request

from gate.domain.error import AuthenticationError, RateLimitedError
from gate.domain.service import AccessGate
from gate.domain.value import Admission
from gate.interface.error import authentication_failed, internal_error, rate_limited
from gate.util.logging import get_logger

logger = get_logger(__name__)

UNKNOWN_CLIENT = "unknown"


def client_identity(request: Request) -> str:
    """Return the identity used for rate limiting: the peer address."""
    if request.client is None or not request.client.host:
        return UNKNOWN_CLIENT
    return request.client.host


def admit_request(
    access_gate: AccessGate, request: Request, rate_limited_route: bool = False
) -> Admission:
    """Run the access gate for a request.

    Args:
        access_gate: Access gate from DI
        request: Incoming request
        rate_limited_route: Whether the route is guarded by the rate limiter

    Returns:
        Admission for the authenticated subject

    Raises:
        HTTPException: 429 when throttled, 401 when not authenticated, 500 if
            the gate itself fails
    """
    try:
        return access_gate.admit(
            identity=client_identity(request),
            authorization=request.headers.get("Authorization"),
            rate_limited=rate_limited_route,
        )
    except RateLimitedError as e:
        raise rate_limited(e.retry_after)
    except AuthenticationError:
        raise authentication_failed()
    except Exception:
        logger.exception("Access gate failed")
        raise internal_error()
