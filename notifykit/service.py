"""
NotificationService — the single entry point for sending notifications.

The service is an ordinary object: build it, wire subscribers into its
dispatcher, pass it to whoever needs it. For code that cannot be handed a
reference, one instance can be installed process-wide:

    service = build_service(config)
    init_service(service)       # once, at startup
    ...
    send_notification(content)  # anywhere afterwards

There is no lazy creation. get_service() before init_service() raises
ServiceError, as does a second init_service().
"""

from __future__ import annotations

import logging
import threading

from notifykit.content.base import NotificationContent
from notifykit.core.dispatcher import ObservableDispatcher, Subscriber
from notifykit.core.errors import ServiceError

logger = logging.getLogger(__name__)


class NotificationService:
    """Owns one ObservableDispatcher and forwards notifications to it."""

    def __init__(self, dispatcher: ObservableDispatcher | None = None) -> None:
        self._dispatcher = dispatcher or ObservableDispatcher()

    @property
    def dispatcher(self) -> ObservableDispatcher:
        return self._dispatcher

    # ━━━ Dispatcher Shortcuts ━━━

    def subscribe(self, subscriber: Subscriber) -> None:
        self._dispatcher.add_subscriber(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        self._dispatcher.remove_subscriber(subscriber)

    # ━━━ Sending ━━━

    def send_notification(self, content: NotificationContent) -> None:
        """Publish content; returns once every subscriber has run."""
        logger.debug(
            f"Sending notification to {self._dispatcher.subscriber_count} subscriber(s)"
        )
        self._dispatcher.set_notification(content)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Process-wide instance
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

_service: NotificationService | None = None
_service_lock = threading.Lock()


def init_service(service: NotificationService) -> NotificationService:
    """Install the process-wide service. Allowed exactly once."""
    global _service
    with _service_lock:
        if _service is not None:
            raise ServiceError("NotificationService is already initialized")
        _service = service
    logger.info("NotificationService initialized")
    return service


def get_service() -> NotificationService:
    """Return the process-wide service installed by init_service()."""
    service = _service
    if service is None:
        raise ServiceError(
            "NotificationService is not initialized; call init_service() at startup"
        )
    return service


def reset_service() -> None:
    """Forget the process-wide service. Used in testing."""
    global _service
    with _service_lock:
        _service = None


def send_notification(content: NotificationContent) -> None:
    """Send through the process-wide service."""
    get_service().send_notification(content)
