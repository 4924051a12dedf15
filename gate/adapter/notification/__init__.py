"""Notification channels."""

from .log import LogNotifier
from .mock import MockNotifier
from .webhook import WebhookNotifier

__all__ = ["LogNotifier", "MockNotifier", "WebhookNotifier"]
