"""
LoggerSubscriber — writes every notification to a console log sink.
"""

from __future__ import annotations

import logging

from rich.console import Console

from notifykit.content.base import NotificationContent
from notifykit.core.dispatcher import Subscriber

logger = logging.getLogger(__name__)

HEADER = "Logging New Notification:"


class LoggerSubscriber(Subscriber):
    """Prints "Logging New Notification:" followed by the rendered text."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def on_notify(self, content: NotificationContent) -> None:
        text = content.render()
        self._console.print(
            f"{HEADER}\n{text}",
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
        logger.debug(f"Notification logged ({len(text)} chars)")
