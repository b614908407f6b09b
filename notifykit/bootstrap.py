"""
Bootstrap — turns a NotifyConfig into a wired NotificationService.

Subscriber order is fixed: the log subscriber (if enabled) first, then the
delivery engine. Strategy order is email, SMS, popup.
"""

from __future__ import annotations

import logging

from rich.console import Console

from notifykit.content.base import NotificationContent, PlainContent
from notifykit.content.decorators import SignatureWrapped, TimestampWrapped, now_timestamp
from notifykit.core.config import NotifyConfig
from notifykit.core.dispatcher import ObservableDispatcher
from notifykit.delivery.email import EmailStrategy
from notifykit.delivery.popup import PopupStrategy
from notifykit.delivery.sms import SmsStrategy
from notifykit.service import NotificationService
from notifykit.subscribers.engine import NotificationEngine
from notifykit.subscribers.logger import LoggerSubscriber

logger = logging.getLogger(__name__)


def build_engine(config: NotifyConfig, console: Console | None = None) -> NotificationEngine:
    """
    Create an engine with a strategy for every configured channel.

    Raises:
        InvalidDestination: If a configured address or number is malformed
    """
    engine = NotificationEngine(isolate_failures=config.delivery.isolate_failures)

    if config.email.configured:
        engine.add_strategy(EmailStrategy(config.email.address, console=console))
    if config.sms.configured:
        engine.add_strategy(SmsStrategy(config.sms.phone_number, console=console))
    if config.popup.enabled:
        engine.add_strategy(PopupStrategy(console=console))

    if not engine.strategies:
        logger.warning("No delivery channels configured; notifications will only be logged")

    return engine


def build_service(config: NotifyConfig, console: Console | None = None) -> NotificationService:
    """Build the dispatcher, register subscribers, and return the service."""
    console = console or Console()
    dispatcher = ObservableDispatcher(isolate_failures=config.delivery.isolate_failures)

    if config.logging.log_notifications:
        dispatcher.add_subscriber(LoggerSubscriber(console=console))
    dispatcher.add_subscriber(build_engine(config, console=console))

    return NotificationService(dispatcher)


def compose_content(
    text: str,
    timestamp: str | None = None,
    signature: str | None = None,
    stamp: bool = False,
    timestamp_format: str = "%Y-%m-%d %H:%M:%S",
) -> NotificationContent:
    """
    Build plain text wrapped in timestamp, then signature.

    An explicit timestamp wins over stamp=True, which uses the current time.
    """
    content: NotificationContent = PlainContent(text)
    if timestamp:
        content = TimestampWrapped(content, timestamp)
    elif stamp:
        content = TimestampWrapped(content, now_timestamp(timestamp_format))
    if signature:
        content = SignatureWrapped(content, signature)
    return content
