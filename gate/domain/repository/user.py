"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from gate.domain.model.user import User


class UserRepository(ABC):
    """Repository for User credential records.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
