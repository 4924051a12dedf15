"""Domain model entities for the authentication gate."""

from gate.domain.model.invitation import Invitation
from gate.domain.model.session import Session
from gate.domain.model.user import User

__all__ = [
    "Invitation",
    "User",
    "Session",
]
