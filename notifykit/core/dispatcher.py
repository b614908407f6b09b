"""
Observable dispatcher — holds the current notification and fans it out.

Observer pattern, synchronous: set_notification() stores the content and
calls every subscriber in registration order before returning.

Failure policy:
    Default: the first subscriber exception propagates to the caller and
    the remaining subscribers are NOT notified.
    isolate_failures=True: each failure is logged with its traceback and
    the sweep continues.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

from notifykit.content.base import NotificationContent

logger = logging.getLogger(__name__)


class Subscriber(ABC):
    """Anything that wants to hear about new notifications."""

    @abstractmethod
    def on_notify(self, content: NotificationContent) -> None:
        """Called synchronously each time a notification is set."""
        ...


class ObservableDispatcher:
    """
    Ordered subscriber list plus the most recent notification.

    Usage:
        dispatcher = ObservableDispatcher()
        dispatcher.add_subscriber(LoggerSubscriber())
        dispatcher.add_subscriber(engine)

        dispatcher.set_notification(PlainContent("hello"))

    The dispatcher does not own its subscribers; whoever built them does.
    """

    def __init__(self, isolate_failures: bool = False) -> None:
        self._subscribers: list[Subscriber] = []
        self._current: NotificationContent | None = None
        self._isolate_failures = isolate_failures
        self._lock = threading.RLock()

    # ━━━ Subscription ━━━

    def add_subscriber(self, subscriber: Subscriber) -> None:
        """
        Append a subscriber.

        Not idempotent: registering the same object twice means it is
        notified twice per notification.
        """
        with self._lock:
            self._subscribers.append(subscriber)
        logger.debug(f"Subscriber added: {type(subscriber).__name__}")

    def remove_subscriber(self, subscriber: Subscriber) -> None:
        """Remove the first registration of this exact object. No-op if absent."""
        with self._lock:
            for i, existing in enumerate(self._subscribers):
                if existing is subscriber:
                    del self._subscribers[i]
                    logger.debug(f"Subscriber removed: {type(subscriber).__name__}")
                    return

    def clear(self) -> None:
        """Remove all subscribers and forget the current notification."""
        with self._lock:
            self._subscribers.clear()
            self._current = None

    # ━━━ Notification ━━━

    def set_notification(self, content: NotificationContent) -> None:
        """Store content as current, then notify every subscriber in order."""
        with self._lock:
            self._current = content
            subscribers = list(self._subscribers)

            for subscriber in subscribers:
                if not self._isolate_failures:
                    subscriber.on_notify(content)
                    continue
                try:
                    subscriber.on_notify(content)
                except Exception as e:
                    logger.error(
                        f"Subscriber {type(subscriber).__name__} failed: {e}",
                        exc_info=e,
                    )

    # ━━━ Introspection ━━━

    @property
    def current(self) -> NotificationContent | None:
        return self._current

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        """Snapshot of registered subscribers, in registration order."""
        with self._lock:
            return tuple(self._subscribers)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    @property
    def isolate_failures(self) -> bool:
        return self._isolate_failures
