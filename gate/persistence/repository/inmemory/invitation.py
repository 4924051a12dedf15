"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from gate.domain.model.invitation import Invitation
from gate.domain.repository.invitation import InvitationRepository
from gate.domain.value import InvitationCode


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing.

    mark_used never awaits between the check and the write, so it is atomic
    with respect to other coroutines on the same event loop.
    """

    def __init__(self) -> None:
        self._invitations: dict[str, Invitation] = {}

    async def save(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Raises:
            IntegrityError: If the code already exists
        """
        if invitation.code.root in self._invitations:
            raise IntegrityError("Duplicate invitation code", None, Exception())

        self._invitations[invitation.code.root] = invitation
        return invitation

    async def find_by_code(self, code: InvitationCode) -> Optional[Invitation]:
        """Find an invitation by its code."""
        return self._invitations.get(code.root)

    async def mark_used(self, code: InvitationCode, email: str, now: datetime) -> bool:
        """Mark an invitation used if it is still consumable by `email`."""
        invitation = self._invitations.get(code.root)
        if invitation is None or not invitation.is_consumable_by(email, now):
            return False

        self._invitations[code.root] = invitation.model_copy(update={"used": True})
        return True

    async def find_unused_expired_before(self, cutoff: datetime) -> list[Invitation]:
        """Find unused invitations that expired before the cutoff."""
        return sorted(
            (
                invitation
                for invitation in self._invitations.values()
                if not invitation.used and invitation.expires_at < cutoff
            ),
            key=lambda invitation: invitation.expires_at,
        )
