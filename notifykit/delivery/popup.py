"""
PopupStrategy — shows the notification on screen in a rich Panel.

There is no destination: the popup goes to whoever is watching the console.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text

from notifykit.delivery.base import DeliveryStrategy


class PopupStrategy(DeliveryStrategy):
    """Displays notifications in a bordered panel."""

    title = "Notification"

    @property
    def name(self) -> str:
        return "popup"

    def deliver(self, text: str) -> None:
        self._write(Panel(Text(text), title=self.title, expand=False))
