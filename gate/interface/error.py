"""Interface layer errors.

Translates domain failures into HTTP errors. Response bodies are fixed
strings; the underlying reason only goes to the logs.
"""

import math

from fastapi import HTTPException, status


def authentication_failed() -> HTTPException:
    """401 for any missing, malformed, invalid or expired bearer token."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Authentication failed",
        headers={"WWW-Authenticate": "Bearer"},
    )


def rate_limited(retry_after: float) -> HTTPException:
    """429 with the whole seconds until the client may retry."""
    return HTTPException(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        detail="Rate limit exceeded",
        headers={"Retry-After": str(max(1, math.ceil(retry_after)))},
    )


def invalid_invitation() -> HTTPException:
    """400 for unknown, used or expired invitation codes."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Invalid or expired invitation code",
    )


def invalid_credentials() -> HTTPException:
    """401 for unknown accounts and wrong passwords alike."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid credentials",
    )


def bad_request(detail: str) -> HTTPException:
    """400 for request content the schema accepts but the domain does not."""
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def internal_error() -> HTTPException:
    """500 that exposes nothing about the failure."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )
