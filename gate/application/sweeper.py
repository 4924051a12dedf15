"""Background sweeper for expired, unused invitations.

Runs beside the HTTP server for the lifetime of the application. Each
iteration notifies every invitee whose code expired more than the resend
grace period ago, then reclaims idle rate limiter buckets.
"""

import asyncio

import logfire
from dishka import AsyncContainer

from gate.config import SweeperSettings
from gate.domain.service import InvitationService, Notifier, RateLimiter


class ExpirySweeper:
    """Periodic resend-notice task.

    Invitations stay candidates until they are consumed, so an invitee is
    notified again on every sweep.
    """

    def __init__(self, container: AsyncContainer, settings: SweeperSettings) -> None:
        """Initialize sweeper.

        Args:
            container: Application-scoped DI container
            settings: Sweep interval
        """
        self.container = container
        self.settings = settings

    async def run_once(self) -> int:
        """Run a single sweep.

        Failures to notify one invitee are logged and do not stop the sweep.
        A failure to query candidates propagates to the caller. Idle rate
        limiter buckets are reclaimed either way.

        Returns:
            Number of invitees successfully notified
        """
        with logfire.span("expiry_sweeper.run_once"):
            try:
                return await self._notify_candidates()
            finally:
                rate_limiter = await self.container.get(RateLimiter)
                rate_limiter.evict_idle()

    async def _notify_candidates(self) -> int:
        async with self.container() as request_container:
            invitation_service = await request_container.get(InvitationService)
            notifier = await request_container.get(Notifier)

            candidates = await invitation_service.find_resend_candidates()

            notified = 0
            for invitation in candidates:
                try:
                    await notifier.notify(
                        invitation.email,
                        {
                            "kind": "invitation_expired",
                            "invitation_id": str(invitation.id),
                            "expired_at": invitation.expires_at.isoformat(),
                        },
                    )
                    notified += 1
                except Exception as e:
                    logfire.error(
                        "Resend notification failed",
                        invitation_id=str(invitation.id),
                        email=invitation.email,
                        error=str(e),
                    )

        logfire.info("Sweep finished", candidates=len(candidates), notified=notified)
        return notified

    async def run_forever(self, stop_event: asyncio.Event) -> None:
        """Sweep until `stop_event` is set.

        The first sweep runs immediately; later sweeps wait for the interval
        or return early when the event is set.

        Args:
            stop_event: Shutdown signal
        """
        logfire.info(
            "Expiry sweeper started", interval_seconds=self.settings.interval_seconds
        )
        while not stop_event.is_set():
            try:
                await self.run_once()
            except Exception as e:
                logfire.exception("Sweep aborted", error=str(e))

            try:
                await asyncio.wait_for(
                    stop_event.wait(), timeout=self.settings.interval_seconds
                )
            except asyncio.TimeoutError:
                pass

        logfire.info("Expiry sweeper stopped")
