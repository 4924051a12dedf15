"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import Update, and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gate.domain.model import Invitation
from gate.domain.repository import InvitationRepository
from gate.domain.value import InvitationCode
from gate.persistence.mappers import invitation_to_dict, row_to_invitation
from gate.persistence.tables import invitation_codes_table


def mark_used_statement(code: InvitationCode, email: str, now: datetime) -> Update:
    """Build the conditional UPDATE that consumes an invitation.

    The row lock taken by the UPDATE serializes concurrent consumers and the
    WHERE clause is re-evaluated after the lock is acquired, so at most one of
    them sees a returned row.
    """
    return (
        update(invitation_codes_table)
        .where(
            and_(
                invitation_codes_table.c.code == code.root,
                invitation_codes_table.c.email == email,
                invitation_codes_table.c.used.is_(False),
                invitation_codes_table.c.expires_at > now,
            )
        )
        .values(used=True)
        .returning(invitation_codes_table.c.id)
    )


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Args:
            invitation: Invitation to save

        Returns:
            Saved invitation
        """
        stmt = insert(invitation_codes_table).values(**invitation_to_dict(invitation))
        await self.session.execute(stmt)
        await self.session.flush()
        return invitation

    async def find_by_code(self, code: InvitationCode) -> Optional[Invitation]:
        """Find an invitation by its code.

        Args:
            code: Invitation code to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitation_codes_table).where(
            invitation_codes_table.c.code == code.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def mark_used(self, code: InvitationCode, email: str, now: datetime) -> bool:
        """Mark an invitation used with a single conditional UPDATE.

        Args:
            code: Invitation code
            email: Email the code must be bound to
            now: Current instant

        Returns:
            True if the invitation was marked used
        """
        result = await self.session.execute(mark_used_statement(code, email, now))
        marked = result.first() is not None
        await self.session.flush()
        return marked

    async def find_unused_expired_before(self, cutoff: datetime) -> list[Invitation]:
        """Find unused invitations that expired before the cutoff.

        Args:
            cutoff: Exclusive upper bound for expires_at

        Returns:
            Matching invitations, oldest expiry first
        """
        stmt = (
            select(invitation_codes_table)
            .where(
                and_(
                    invitation_codes_table.c.used.is_(False),
                    invitation_codes_table.c.expires_at < cutoff,
                )
            )
            .order_by(invitation_codes_table.c.expires_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]
