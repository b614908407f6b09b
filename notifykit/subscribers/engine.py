"""
NotificationEngine — a subscriber that fans content out to delivery strategies.

Strategy pattern: the engine knows nothing about channels beyond
DeliveryStrategy.deliver(). Content is rendered once per notification and
the same text goes to every strategy, in registration order.
"""

from __future__ import annotations

import logging

from notifykit.content.base import NotificationContent
from notifykit.core.dispatcher import Subscriber
from notifykit.delivery.base import DeliveryStrategy

logger = logging.getLogger(__name__)


class NotificationEngine(Subscriber):
    """
    Delivers each notification through all registered strategies.

    Usage:
        engine = NotificationEngine()
        engine.add_strategy(EmailStrategy("someone@example.com"))
        engine.add_strategy(SmsStrategy("+919876543210"))
        dispatcher.add_subscriber(engine)

    A strategy that raises aborts delivery to the strategies after it,
    unless the engine was built with isolate_failures=True.
    """

    def __init__(
        self,
        strategies: list[DeliveryStrategy] | None = None,
        isolate_failures: bool = False,
    ) -> None:
        self._strategies: list[DeliveryStrategy] = list(strategies or [])
        self._isolate_failures = isolate_failures

    def add_strategy(self, strategy: DeliveryStrategy) -> None:
        self._strategies.append(strategy)
        logger.debug(f"Delivery strategy registered: {strategy.name}")

    @property
    def strategies(self) -> tuple[DeliveryStrategy, ...]:
        return tuple(self._strategies)

    @property
    def strategy_names(self) -> list[str]:
        return [s.name for s in self._strategies]

    def on_notify(self, content: NotificationContent) -> None:
        text = content.render()
        for strategy in list(self._strategies):
            if not self._isolate_failures:
                strategy.deliver(text)
                continue
            try:
                strategy.deliver(text)
            except Exception as e:
                logger.error(
                    f"Strategy {strategy.name} delivery failed: {e}",
                    exc_info=e,
                )
