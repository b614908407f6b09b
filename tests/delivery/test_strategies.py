"""Tests for delivery strategies."""

import pytest

from notifykit.core.errors import InvalidDestination, NotifyError
from notifykit.delivery.base import DeliveryStrategy
from notifykit.delivery.email import EmailStrategy, validate_email
from notifykit.delivery.popup import PopupStrategy
from notifykit.delivery.sms import SmsStrategy, validate_phone_number


# ── Email ────────────────────────────────────────────────────────────────────

class TestEmailStrategy:
    def test_deliver_format(self, console):
        strategy = EmailStrategy("random.person@example.com", console=console)
        strategy.deliver("hello")
        assert console.text == (
            "Sending email Notification to: random.person@example.com\nhello\n"
        )

    def test_name_and_address(self, console):
        strategy = EmailStrategy("  a@b.com ", console=console)
        assert strategy.name == "email"
        assert strategy.address == "a@b.com"

    def test_empty_address_rejected(self):
        with pytest.raises(InvalidDestination) as exc:
            EmailStrategy("")
        assert exc.value.channel == "email"

    def test_blank_address_rejected(self):
        with pytest.raises(InvalidDestination):
            EmailStrategy("   ")

    @pytest.mark.parametrize("address", ["no-at-sign", "@example.com", "person@", "a@b@c", "a b@c.com"])
    def test_malformed_address_rejected(self, address):
        with pytest.raises(InvalidDestination) as exc:
            validate_email(address)
        assert exc.value.destination == address.strip()

    def test_invalid_destination_is_notify_error(self):
        with pytest.raises(NotifyError):
            EmailStrategy("")

    def test_markup_is_not_interpreted(self, console):
        EmailStrategy("a@b.com", console=console).deliver("[bold]raw[/bold] :smile:")
        assert "[bold]raw[/bold] :smile:" in console.text


# ── SMS ──────────────────────────────────────────────────────────────────────

class TestSmsStrategy:
    def test_deliver_format(self, console):
        strategy = SmsStrategy("+919876543210", console=console)
        strategy.deliver("hello")
        assert console.text == "Sending SMS Notification to: +919876543210\nhello\n"

    def test_name(self, console):
        assert SmsStrategy("555-0100", console=console).name == "sms"

    def test_empty_number_rejected(self):
        with pytest.raises(InvalidDestination) as exc:
            SmsStrategy("")
        assert exc.value.channel == "sms"

    @pytest.mark.parametrize("number", ["abc", "+", "12", "++123", "123x456"])
    def test_malformed_number_rejected(self, number):
        with pytest.raises(InvalidDestination):
            validate_phone_number(number)

    @pytest.mark.parametrize("number", ["+919876543210", "555 0100", "0-800-123", " 911 "])
    def test_valid_numbers(self, number):
        assert validate_phone_number(number) == number.strip()


# ── Popup ────────────────────────────────────────────────────────────────────

class TestPopupStrategy:
    def test_deliver_shows_text_without_destination(self, console):
        PopupStrategy(console=console).deliver("Your order has been shipped!")
        out = console.text
        assert "Your order has been shipped!" in out
        assert "Notification" in out
        assert "Sending" not in out

    def test_name(self, console):
        assert PopupStrategy(console=console).name == "popup"


def test_strategies_share_base():
    for strategy in (EmailStrategy("a@b.com"), SmsStrategy("+123"), PopupStrategy()):
        assert isinstance(strategy, DeliveryStrategy)
