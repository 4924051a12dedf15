"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from gate.domain.model.invitation import Invitation
from gate.domain.value import InvitationCode


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation
        """
        pass

    @abstractmethod
    async def find_by_code(self, code: InvitationCode) -> Invitation | None:
        """Find an invitation by its code.

        Args:
            code: The invitation code

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def mark_used(
        self, code: InvitationCode, email: str, now: datetime
    ) -> bool:
        """Atomically mark an invitation as used.

        The update only applies when the code exists, is bound to `email`, is
        still unused and has not expired at `now`. Check and mutation happen
        as a single step, so concurrent callers cannot both succeed.

        Args:
            code: The invitation code
            email: The email the code must be bound to
            now: Current instant used for the expiry check

        Returns:
            True if exactly one invitation was marked used, False otherwise
        """
        pass

    @abstractmethod
    async def find_unused_expired_before(self, cutoff: datetime) -> list[Invitation]:
        """Find unused invitations whose expiry lies before `cutoff`.

        Args:
            cutoff: Exclusive upper bound for expires_at

        Returns:
            Matching invitations ordered by expiry
        """
        pass
