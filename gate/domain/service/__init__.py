"""Domain services."""

from .access_gate import AccessGate
from .base import Service
from .invitation_service import InvitationService
from .notification import Notifier
from .password import PasswordHasher
from .rate_limiter import RateLimiter
from .token_service import TokenService

__all__ = [
    "AccessGate",
    "InvitationService",
    "Notifier",
    "PasswordHasher",
    "RateLimiter",
    "Service",
    "TokenService",
]
