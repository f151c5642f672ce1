"""Test configuration for notify-dispatch."""

from __future__ import annotations

import pytest

from notify_dispatch import (
    EmailProvider,
    InAppProvider,
    InMemoryNotificationLog,
    InMemoryTransport,
    NotificationChannel,
    NotificationRecipient,
    NotificationService,
    PushProvider,
    SmsProvider,
)

pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def recipient() -> NotificationRecipient:
    """Recipient reachable on every channel."""
    return NotificationRecipient(
        user_id="user-42",
        email="alice@example.com",
        phone="9123456780",
        push_token="fcm-token-abcdef123456",
        role="customer",
    )


@pytest.fixture
def transports() -> dict[NotificationChannel, InMemoryTransport]:
    return {
        NotificationChannel.EMAIL: InMemoryTransport(id_prefix="email"),
        NotificationChannel.SMS: InMemoryTransport(id_prefix="sms"),
        NotificationChannel.PUSH: InMemoryTransport(id_prefix="push"),
    }


@pytest.fixture
def log_store() -> InMemoryNotificationLog:
    return InMemoryNotificationLog(max_logs=100)


@pytest.fixture
def service(transports, log_store) -> NotificationService:
    """Service wired to in-memory transports for every channel."""
    return NotificationService(
        {
            NotificationChannel.EMAIL: EmailProvider(
                transport=transports[NotificationChannel.EMAIL]
            ),
            NotificationChannel.SMS: SmsProvider(transport=transports[NotificationChannel.SMS]),
            NotificationChannel.PUSH: PushProvider(
                transport=transports[NotificationChannel.PUSH]
            ),
            NotificationChannel.IN_APP: InAppProvider(),
        },
        log_store=log_store,
        provider_timeout=1.0,
    )
