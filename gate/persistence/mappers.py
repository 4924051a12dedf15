"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from gate.domain.model import Invitation, Session, User
from gate.domain.value import InvitationCode, InvitationId, SessionId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        code=InvitationCode(row["code"]),
        email=row["email"],
        used=row["used"],
        created_at=row["created_at"],
        expires_at=row["expires_at"],
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    InvitationCode dumps to its plain string.
    """
    return invitation.model_dump()


def row_to_session(row: Dict[str, Any]) -> Session:
    """Convert database row to Session domain model."""
    return Session(
        id=SessionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        token=row["token"],
        created_at=row["created_at"],
    )


def session_to_dict(session: Session) -> Dict[str, Any]:
    """Convert Session domain model to database dict."""
    return session.model_dump()
