"""Tests for channel providers."""

import logging

import pytest

from notify_dispatch.config import DeploymentMode
from notify_dispatch.delivery import NotificationChannel, RenderedNotification
from notify_dispatch.memory import InMemoryTransport, LoggingTransport
from notify_dispatch.payload import NotificationRecipient
from notify_dispatch.providers import (
    SMS_LENGTH_ERROR,
    EmailProvider,
    InAppProvider,
    PushProvider,
    SmsProvider,
)


@pytest.fixture
def content() -> RenderedNotification:
    return RenderedNotification(body_text="Hello", subject="Greetings", title="Hi")


@pytest.mark.asyncio
class TestEmailProvider:
    async def test_sends_through_transport(self, recipient, content):
        transport = InMemoryTransport(id_prefix="smtp")
        provider = EmailProvider(transport=transport)

        result = await provider.send(recipient, content, {"event": "otp_sent"})

        assert result.success is True
        assert result.channel == NotificationChannel.EMAIL
        assert result.message_id.startswith("smtp-")
        transport.assert_sent("alice@example.com")
        assert transport.sent_messages[0].metadata == {"event": "otp_sent"}

    async def test_disabled_does_not_transmit(self, recipient, content):
        transport = InMemoryTransport()
        provider = EmailProvider(enabled=False, transport=transport)

        result = await provider.send(recipient, content)

        assert result.success is False
        assert result.error == "Email notifications are disabled"
        assert transport.sent_messages == []

    async def test_missing_address(self, content):
        transport = InMemoryTransport()
        provider = EmailProvider(transport=transport)

        result = await provider.send(NotificationRecipient(user_id="u1"), content)

        assert result.error == "No email address provided"
        assert transport.sent_messages == []

    async def test_transport_error_becomes_failed_result(self, recipient, content, caplog):
        transport = InMemoryTransport(fail_with=ConnectionError("SMTP connection timeout"))
        provider = EmailProvider(transport=transport)

        with caplog.at_level(logging.WARNING, logger="notify_dispatch.providers.base"):
            result = await provider.send(recipient, content)

        assert result.success is False
        assert result.error == "SMTP connection timeout"
        assert "alice@example.com" not in caplog.text
        assert "al***@example.com" in caplog.text


@pytest.mark.asyncio
class TestSmsProvider:
    async def test_length_limit(self, recipient):
        transport = InMemoryTransport()
        provider = SmsProvider(transport=transport)

        result = await provider.send(recipient, RenderedNotification(body_text="x" * 161))

        assert result.success is False
        assert result.error == SMS_LENGTH_ERROR
        assert transport.sent_messages == []

    async def test_exactly_160_chars_is_sent(self, recipient):
        transport = InMemoryTransport()
        provider = SmsProvider(transport=transport)

        result = await provider.send(recipient, RenderedNotification(body_text="x" * 160))

        assert result.success is True
        transport.assert_sent("9123456780")

    async def test_failure_log_masks_international_phone(self, caplog):
        provider = SmsProvider(transport=InMemoryTransport(fail_with=ConnectionError("refused")))
        recipient = NotificationRecipient(phone="+919123456780")

        with caplog.at_level(logging.WARNING, logger="notify_dispatch.providers.base"):
            result = await provider.send(recipient, RenderedNotification(body_text="hi"))

        assert result.error == "refused"
        assert "919123456780" not in caplog.text
        assert "***6780" in caplog.text

    async def test_missing_phone(self):
        provider = SmsProvider(transport=InMemoryTransport())

        result = await provider.send(
            NotificationRecipient(email="a@b.co"), RenderedNotification(body_text="hi")
        )

        assert result.error == "No phone number provided"

    async def test_disabled_checked_before_address(self):
        provider = SmsProvider(enabled=False)

        result = await provider.send(NotificationRecipient(), RenderedNotification(body_text="hi"))

        assert result.error == "SMS notifications are disabled"


@pytest.mark.asyncio
class TestPushProvider:
    async def test_sends_to_token(self, recipient, content):
        transport = InMemoryTransport()
        provider = PushProvider(transport=transport)

        result = await provider.send(recipient, content)

        assert result.success is True
        transport.assert_sent("fcm-token-abcdef123456")

    async def test_missing_token(self, content):
        provider = PushProvider()

        result = await provider.send(NotificationRecipient(user_id="u1"), content)

        assert result.error == "No push token provided"


@pytest.mark.asyncio
class TestSimulatedMode:
    async def test_default_transport_logs_and_returns_test_id(self, recipient, content, caplog):
        provider = SmsProvider()

        assert isinstance(provider.transport, LoggingTransport)
        with caplog.at_level(logging.INFO, logger="notify_dispatch.memory.console"):
            result = await provider.send(recipient, content)

        assert result.success is True
        assert result.message_id.startswith("test-sms-")
        assert "[SIMULATED SMS]" in caplog.text
        assert "9123456780" not in caplog.text

    async def test_push_simulated_id(self, recipient, content):
        result = await PushProvider().send(recipient, content)

        assert result.message_id.startswith("test-push-")


@pytest.mark.asyncio
class TestInAppProvider:
    async def test_always_succeeds_when_enabled(self, content):
        result = await InAppProvider().send(NotificationRecipient(user_id="u1"), content)

        assert result.success is True
        assert result.channel == NotificationChannel.IN_APP
        assert result.message_id.startswith("inapp-")

    async def test_disabled(self, content):
        result = await InAppProvider(enabled=False).send(NotificationRecipient(), content)

        assert result.success is False
        assert result.error == "In-app notifications are disabled"


def test_live_mode_requires_transport():
    with pytest.raises(ValueError, match="requires a transport in live mode"):
        EmailProvider(mode=DeploymentMode.LIVE)
