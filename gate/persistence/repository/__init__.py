"""PostgreSQL repository implementations."""

from gate.persistence.repository.invitation import PostgresInvitationRepository
from gate.persistence.repository.session import PostgresSessionRepository
from gate.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresInvitationRepository",
    "PostgresUserRepository",
    "PostgresSessionRepository",
]
