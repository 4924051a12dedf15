"""Invitation entity.

Registration is invitation-only: an authenticated caller issues a code bound
to an email address, and the code is consumed when that address registers.
"""

from datetime import datetime

from gate.domain.model.common import DomainModel
from gate.domain.value import InvitationCode, InvitationId


class Invitation(DomainModel):
    """Invitation code bound to one email address.

    Business rules:
    - A code can be consumed only by its bound email
    - A code can be consumed only before expires_at
    - Once used, a code stays used forever
    """

    id: InvitationId
    code: InvitationCode
    email: str
    used: bool = False
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Check whether the validity window has passed."""
        return now >= self.expires_at

    def is_consumable_by(self, email: str, now: datetime) -> bool:
        """Check whether the given email may consume this code at `now`."""
        return not self.used and not self.is_expired(now) and self.email == email
