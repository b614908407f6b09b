"""
Delivery primitives — the DeliveryStrategy ABC.

Every channel (email, SMS, popup) implements DeliveryStrategy. The
NotificationEngine hands each one the already-rendered text; strategies
never see the content object itself.

Delivery is simulated: strategies write to a rich Console, which defaults
to stdout and can be pointed at any file for capture.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from rich.console import Console


class DeliveryStrategy(ABC):
    """
    Abstract delivery channel.

    Implement this to add a new channel. Destinations are validated in
    __init__, so a constructed strategy can always deliver.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier, e.g. 'email', 'sms', 'popup'."""
        ...

    @abstractmethod
    def deliver(self, text: str) -> None:
        """Transmit the rendered notification text through this channel."""
        ...

    def _write(self, renderable: Any) -> None:
        # Notification text is emitted as-is, never parsed as rich markup.
        self._console.print(
            renderable,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
