"""Tests for dispatcher configuration."""

import pytest

from notify_dispatch.config import (
    DEFAULT_PROVIDER_TIMEOUT,
    MAX_LOGS,
    ChannelSettings,
    DeploymentMode,
    DispatcherConfig,
)
from notify_dispatch.delivery import NotificationChannel, NotificationEvent


def test_defaults():
    config = DispatcherConfig()

    assert config.mode == DeploymentMode.SIMULATED
    assert config.max_logs == MAX_LOGS == 1000
    assert config.provider_timeout == DEFAULT_PROVIDER_TIMEOUT
    assert config.smtp.host == "smtp.gmail.com"
    assert config.smtp.port == 587
    assert all(config.channels.channel_enabled(channel) for channel in NotificationChannel)


def test_from_env():
    config = DispatcherConfig.from_env(
        {
            "NOTIFY_MODE": "LIVE",
            "SMS_ENABLED": "false",
            "PUSH_ENABLED": "no",
            "SMTP_HOST": "mail.example.com",
            "SMTP_PORT": "2525",
            "SMTP_USER": "mailer",
            "SMTP_FROM": "alerts@example.com",
            "SMS_GATEWAY_URL": "https://sms.example.com/send",
            "SMS_AUTH_KEY": "key",
            "SMS_FROM": "SRJINF",
            "FCM_PROJECT_ID": "srj",
            "NOTIFY_MAX_LOGS": "50",
            "NOTIFY_PROVIDER_TIMEOUT": "2.5",
        }
    )

    assert config.mode == DeploymentMode.LIVE
    assert config.channels.sms_enabled is False
    # Only the literal "false" disables a channel
    assert config.channels.push_enabled is True
    assert config.smtp.host == "mail.example.com"
    assert config.smtp.port == 2525
    assert config.smtp.username == "mailer"
    assert config.smtp.password is None
    assert config.smtp.from_email == "alerts@example.com"
    assert config.sms_gateway.default_from == "SRJINF"
    assert config.push.project_id == "srj"
    assert config.push.access_token is None
    assert config.max_logs == 50
    assert config.provider_timeout == 2.5


def test_from_empty_env():
    assert DispatcherConfig.from_env({}) == DispatcherConfig()


def test_event_overrides():
    settings = ChannelSettings(
        events={NotificationEvent.PROMOTIONAL: {NotificationChannel.SMS: False}}
    )

    assert settings.event_enabled(NotificationEvent.PROMOTIONAL, NotificationChannel.SMS) is False
    assert settings.event_enabled(NotificationEvent.PROMOTIONAL, NotificationChannel.EMAIL) is True
    assert settings.event_enabled(NotificationEvent.OTP_SENT, NotificationChannel.SMS) is True


@pytest.mark.parametrize("kwargs", [{"max_logs": 0}, {"provider_timeout": 0}])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        DispatcherConfig(**kwargs)
