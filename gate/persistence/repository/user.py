"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from gate.domain.model import User
from gate.domain.repository import UserRepository
from gate.persistence.mappers import row_to_user, user_to_dict
from gate.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email.

        Args:
            email: Email address

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            IntegrityError: If the email is already registered
        """
        stmt = insert(users_table).values(**user_to_dict(user))
        await self.session.execute(stmt)
        await self.session.flush()
        return user
