"""Outbound notification interface."""

from typing import Any


class Notifier:
    """Channel used to tell an invitee about their invitation.

    Implementations live in the adapter layer and raise NotificationError
    when delivery fails.
    """

    async def notify(self, email: str, context: dict[str, Any]) -> None:
        """Send a notification to an email address.

        Args:
            email: Recipient address
            context: Template data (kind, code, expiry)
        """
        raise NotImplementedError
