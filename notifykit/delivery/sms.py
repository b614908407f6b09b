"""
SmsStrategy — simulated SMS delivery.

Phone numbers are free-form as long as they look like one: an optional
leading '+', then digits with optional spaces or dashes, at least 3 digits.
"""

from __future__ import annotations

import logging
import re

from rich.console import Console

from notifykit.core.errors import InvalidDestination
from notifykit.delivery.base import DeliveryStrategy

logger = logging.getLogger(__name__)

_PHONE_RE = re.compile(r"^\+?[0-9][0-9 \-]*$")
_MIN_DIGITS = 3


def validate_phone_number(phone_number: str) -> str:
    """Return the stripped number, or raise InvalidDestination."""
    phone_number = (phone_number or "").strip()
    if not phone_number:
        raise InvalidDestination(
            "Phone number must not be empty", channel="sms", destination=phone_number
        )
    digits = sum(c.isdigit() for c in phone_number)
    if not _PHONE_RE.match(phone_number) or digits < _MIN_DIGITS:
        raise InvalidDestination(
            f"Malformed phone number: {phone_number!r}",
            channel="sms",
            destination=phone_number,
        )
    return phone_number


class SmsStrategy(DeliveryStrategy):
    """Sends notifications to a single phone number."""

    def __init__(self, phone_number: str, console: Console | None = None) -> None:
        self._phone_number = validate_phone_number(phone_number)
        super().__init__(console)

    @property
    def name(self) -> str:
        return "sms"

    @property
    def phone_number(self) -> str:
        return self._phone_number

    def deliver(self, text: str) -> None:
        self._write(f"Sending SMS Notification to: {self._phone_number}\n{text}")
        logger.debug(f"SMS notification sent to {self._phone_number}")

    def __repr__(self) -> str:
        return f"SmsStrategy({self._phone_number!r})"
