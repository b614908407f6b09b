"""
EmailStrategy — simulated email delivery.

Writes a "Sending email Notification to: <address>" header line followed by
the rendered text. No mail is sent.
"""

from __future__ import annotations

import logging

from rich.console import Console

from notifykit.core.errors import InvalidDestination
from notifykit.delivery.base import DeliveryStrategy

logger = logging.getLogger(__name__)


def validate_email(address: str) -> str:
    """Return the stripped address, or raise InvalidDestination."""
    address = (address or "").strip()
    if not address:
        raise InvalidDestination(
            "Email address must not be empty", channel="email", destination=address
        )
    local, sep, domain = address.partition("@")
    if not sep or not local or not domain or "@" in domain or any(c.isspace() for c in address):
        raise InvalidDestination(
            f"Malformed email address: {address!r}", channel="email", destination=address
        )
    return address


class EmailStrategy(DeliveryStrategy):
    """Sends notifications to a single email address."""

    def __init__(self, address: str, console: Console | None = None) -> None:
        self._address = validate_email(address)
        super().__init__(console)

    @property
    def name(self) -> str:
        return "email"

    @property
    def address(self) -> str:
        return self._address

    def deliver(self, text: str) -> None:
        self._write(f"Sending email Notification to: {self._address}\n{text}")
        logger.debug(f"Email notification sent to {self._address}")

    def __repr__(self) -> str:
        return f"EmailStrategy({self._address!r})"
