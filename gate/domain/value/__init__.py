"""Domain value objects for the authentication gate."""

from gate.domain.value.identifiers import InvitationId, SessionId, UserId
from gate.domain.value.types import (
    Admission,
    AuthenticationFailureReason,
    Email,
    InvitationCode,
    InvitationRejection,
    IssuedToken,
    RateDecision,
)

__all__ = [
    # Identifiers
    "UserId",
    "InvitationId",
    "SessionId",
    # Types
    "Email",
    "InvitationCode",
    "InvitationRejection",
    "AuthenticationFailureReason",
    "IssuedToken",
    "RateDecision",
    "Admission",
]
