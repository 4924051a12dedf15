"""Recording notification channel for tests."""

from typing import Any

from gate.adapter.error import NotificationError
from gate.domain.service.notification import Notifier


class MockNotifier(Notifier):
    """Records notifications in memory.

    Addresses listed in `failing` raise NotificationError instead.
    """

    def __init__(self, failing: set[str] | None = None) -> None:
        self.sent: list[tuple[str, dict[str, Any]]] = []
        self.failing = failing or set()

    async def notify(self, email: str, context: dict[str, Any]) -> None:
        if email in self.failing:
            raise NotificationError(f"Mock delivery failure for {email}")
        self.sent.append((email, context))
