"""Repository interfaces for the authentication gate.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from gate.domain.repository.invitation import InvitationRepository
from gate.domain.repository.session import SessionRepository
from gate.domain.repository.user import UserRepository

__all__ = [
    "InvitationRepository",
    "UserRepository",
    "SessionRepository",
]
