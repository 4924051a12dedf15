"""User credential record."""

from datetime import datetime

from gate.domain.model.common import DomainModel
from gate.domain.value import UserId


class User(DomainModel):
    """Registered account.

    Only the password digest is stored, never the plaintext.
    """

    id: UserId
    email: str
    password_hash: str
    created_at: datetime
