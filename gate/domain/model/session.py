"""Login session record."""

from datetime import datetime

from gate.domain.model.common import DomainModel
from gate.domain.value import SessionId, UserId


class Session(DomainModel):
    """Record of a successful login with the bearer token that was presented."""

    id: SessionId
    user_id: UserId
    token: str
    created_at: datetime
