"""Session repository interface."""

from abc import ABC, abstractmethod

from gate.domain.model.session import Session


class SessionRepository(ABC):
    """Repository for login session records."""

    @abstractmethod
    async def save(self, session: Session) -> Session:
        """Insert a new session.

        Args:
            session: The session to save

        Returns:
            The saved session
        """
        pass
