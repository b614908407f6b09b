"""
Notification content primitives — the NotificationContent ABC and PlainContent.

Everything the dispatcher carries implements NotificationContent. Decorators
in notifykit.content.decorators wrap another content value and add their own
formatting around its rendered text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class NotificationContent(ABC):
    """
    A renderable, immutable text payload.

    render() must be pure: same construction inputs, same output, no side
    effects. Subscribers may call it any number of times.
    """

    @abstractmethod
    def render(self) -> str:
        """Return the full text of this notification."""
        ...


@dataclass(frozen=True, slots=True)
class PlainContent(NotificationContent):
    """Undecorated notification text, rendered verbatim."""

    text: str

    def render(self) -> str:
        return self.text
