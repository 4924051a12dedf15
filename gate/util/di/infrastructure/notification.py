"""Notification infrastructure providers."""

from dishka import Scope, provide

from gate.adapter.notification import LogNotifier, WebhookNotifier
from gate.config import Settings
from gate.domain.service import Notifier
from gate.util.di.base import ProviderBase
from gate.util.observability import instrument_httpx


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider.

    Posts to the configured webhook, or only logs when none is configured.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self, settings: Settings) -> Notifier:
        """Provide notification channel."""
        if not settings.notifications.webhook_url:
            return LogNotifier()

        instrument_httpx()
        return WebhookNotifier(
            url=settings.notifications.webhook_url,
            timeout=settings.notifications.timeout_seconds,
        )
