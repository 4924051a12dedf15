"""In-memory session repository for testing."""

from gate.domain.model.session import Session
from gate.domain.repository.session import SessionRepository
from gate.domain.value import UserId


class InMemorySessionRepository(SessionRepository):
    """In-memory implementation of SessionRepository for testing."""

    def __init__(self) -> None:
        self._sessions: list[Session] = []

    async def save(self, session: Session) -> Session:
        """Insert a new login session."""
        self._sessions.append(session)
        return session

    def find_by_user(self, user_id: UserId) -> list[Session]:
        """Return sessions recorded for a user, oldest first."""
        return [s for s in self._sessions if s.user_id == user_id]
