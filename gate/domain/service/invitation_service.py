"""Invitation registry domain service."""

import base64
import secrets
from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from gate.config import InvitationSettings
from gate.domain.error import InvitationInvalidError
from gate.domain.model.invitation import Invitation
from gate.domain.repository import InvitationRepository
from gate.domain.value import InvitationCode, InvitationId, InvitationRejection
from gate.util.clock import Clock

from .base import Service

CODE_BYTES = 16


def generate_code() -> InvitationCode:
    """Generate a random URL-safe invitation code."""
    raw = secrets.token_bytes(CODE_BYTES)
    return InvitationCode(base64.urlsafe_b64encode(raw).decode("ascii"))


class InvitationService(Service):
    """Domain service for the invitation code lifecycle.

    A code moves from issued to either used or expired. Used is terminal.
    """

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        invitation_settings: InvitationSettings,
        clock: Clock,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            invitation_settings: Validity and resend windows
            clock: Time source
        """
        self.invitation_repository = invitation_repository
        self.invitation_settings = invitation_settings
        self.clock = clock

    async def issue_code(self, email: str) -> Invitation:
        """Issue a new invitation code bound to an email.

        Args:
            email: Address allowed to redeem the code

        Returns:
            Persisted invitation
        """
        with logfire.span("invitation_service.issue_code", email=email):
            now = self.clock.now()
            invitation = Invitation(
                id=InvitationId(uuid4()),
                code=generate_code(),
                email=email,
                used=False,
                created_at=now,
                expires_at=now
                + timedelta(seconds=self.invitation_settings.code_validity_seconds),
            )

            saved = await self.invitation_repository.save(invitation)
            logfire.info(
                "Invitation issued",
                invitation_id=str(saved.id),
                email=email,
                code=saved.code.redacted() + "...",
                expires_at=saved.expires_at,
            )
            return saved

    async def consume(self, code: InvitationCode, email: str) -> None:
        """Consume an invitation code for an email.

        The code is marked used in a single conditional update. When the
        update does not apply, the invitation is read back only to report
        why.

        Args:
            code: Submitted invitation code
            email: Address registering with the code

        Raises:
            InvitationInvalidError: If the code is unknown, used or expired
        """
        with logfire.span(
            "invitation_service.consume", code=code.redacted() + "...", email=email
        ):
            now = self.clock.now()
            if await self.invitation_repository.mark_used(code, email, now):
                logfire.info("Invitation consumed", code=code.redacted() + "...")
                return

            reason = await self._classify_rejection(code, email, now)
            logfire.warn(
                "Invitation rejected",
                code=code.redacted() + "...",
                email=email,
                reason=reason.value,
            )
            raise InvitationInvalidError(reason)

    async def _classify_rejection(
        self, code: InvitationCode, email: str, now: datetime
    ) -> InvitationRejection:
        invitation = await self.invitation_repository.find_by_code(code)
        if invitation is None or invitation.email != email:
            return InvitationRejection.NOT_FOUND
        if invitation.used:
            return InvitationRejection.ALREADY_USED
        if invitation.is_expired(now):
            return InvitationRejection.EXPIRED
        # Lost a race with a concurrent consumer between update and re-read
        return InvitationRejection.ALREADY_USED

    async def find_resend_candidates(self) -> list[Invitation]:
        """Find unused invitations that expired more than the grace period ago.

        Returns:
            Invitations whose invitee should be told to request a new code
        """
        with logfire.span("invitation_service.find_resend_candidates"):
            cutoff = self.clock.now() - timedelta(
                seconds=self.invitation_settings.resend_grace_seconds
            )
            candidates = await self.invitation_repository.find_unused_expired_before(
                cutoff
            )
            logfire.info(
                "Resend candidates found", count=len(candidates), cutoff=cutoff
            )
            return candidates
