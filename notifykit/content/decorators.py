"""
Content decorators — wrap a NotificationContent and add presentation.

Each decorator holds exactly one inner value and never alters its output:
TimestampWrapped always prefixes, SignatureWrapped always suffixes.

    content = SignatureWrapped(
        TimestampWrapped(PlainContent("Your order has been shipped!"), "2025-04-13 14:22:00"),
        "Customer Care",
    )
    content.render()
    # '[2025-04-13 14:22:00] Your order has been shipped!\\n-- Customer Care'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from notifykit.content.base import NotificationContent

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_timestamp(fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """Current local time as a display string."""
    return datetime.now().strftime(fmt)


@dataclass(frozen=True, slots=True)
class TimestampWrapped(NotificationContent):
    """
    Prefixes the inner text with "[timestamp] ".

    The timestamp is fixed when the wrapper is built, so rendering twice
    gives the same string.
    """

    inner: NotificationContent
    timestamp: str = field(default_factory=now_timestamp)

    def render(self) -> str:
        return f"[{self.timestamp}] {self.inner.render()}"


@dataclass(frozen=True, slots=True)
class SignatureWrapped(NotificationContent):
    """Appends a "-- signature" line after the inner text."""

    inner: NotificationContent
    signature: str

    def render(self) -> str:
        return f"{self.inner.render()}\n-- {self.signature}"
