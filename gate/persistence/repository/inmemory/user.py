"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from gate.domain.model.user import User
from gate.domain.repository.user import UserRepository


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        return self._users.get(email)

    async def save(self, user: User) -> User:
        """Insert a new user.

        Raises:
            IntegrityError: If the email is already registered
        """
        if user.email in self._users:
            raise IntegrityError("Duplicate user email", None, Exception())

        self._users[user.email] = user
        return user
