"""Webhook notification channel."""

from typing import Any

import httpx
import logfire

from gate.adapter.error import NotificationError
from gate.domain.service.notification import Notifier


class WebhookNotifier(Notifier):
    """Delivers notifications as JSON POSTs to a mailer webhook."""

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize webhook notifier.

        Args:
            url: Endpoint receiving notification payloads
            timeout: Request timeout in seconds
            transport: Optional httpx transport override
        """
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def notify(self, email: str, context: dict[str, Any]) -> None:
        """POST the notification to the webhook.

        Raises:
            NotificationError: If the request fails or is not accepted
        """
        payload = {"email": email, **context}

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.url, json=payload, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Notification webhook HTTP error", error=str(e))
            raise NotificationError(f"HTTP error delivering notification: {e}")

        if response.status_code >= 300:
            logfire.error(
                "Notification webhook rejected payload",
                status_code=response.status_code,
                error=response.text,
            )
            raise NotificationError(
                f"Notification webhook returned {response.status_code}"
            )

        logfire.info("Notification delivered", email=email, kind=context.get("kind"))
