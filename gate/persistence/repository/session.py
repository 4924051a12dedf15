"""PostgreSQL implementation of Session repository."""

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from gate.domain.model import Session
from gate.domain.repository import SessionRepository
from gate.persistence.mappers import session_to_dict
from gate.persistence.tables import sessions_table


class PostgresSessionRepository(SessionRepository):
    """PostgreSQL implementation of SessionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, session: Session) -> Session:
        """Insert a new login session."""
        stmt = insert(sessions_table).values(**session_to_dict(session))
        await self.session.execute(stmt)
        await self.session.flush()
        return session
