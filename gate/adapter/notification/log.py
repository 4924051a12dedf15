"""Log-only notification channel."""

from typing import Any

import logfire

from gate.domain.service.notification import Notifier


class LogNotifier(Notifier):
    """Writes notifications to the log instead of sending them.

    Used when no webhook is configured.
    """

    async def notify(self, email: str, context: dict[str, Any]) -> None:
        logfire.info("Notification (log only)", email=email, **context)
