"""Dispatcher configuration.

All settings are plain frozen dataclasses decided once at startup and
passed in at construction; providers never read the environment themselves.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from .delivery import NotificationChannel, NotificationEvent

MAX_LOGS = 1000
DEFAULT_PROVIDER_TIMEOUT = 10.0


class DeploymentMode(str, Enum):
    """How providers transmit: simulated (log only) or live transports."""

    SIMULATED = "simulated"
    LIVE = "live"


@dataclass(frozen=True)
class ChannelSettings:
    """Global channel switches plus optional per-event overrides.

    Attributes:
        events: ``{event: {channel: enabled}}``. A missing entry means the
            global switch applies.
    """

    email_enabled: bool = True
    sms_enabled: bool = True
    push_enabled: bool = True
    in_app_enabled: bool = True
    events: Mapping[NotificationEvent, Mapping[NotificationChannel, bool]] = field(
        default_factory=dict
    )

    def channel_enabled(self, channel: NotificationChannel) -> bool:
        return {
            NotificationChannel.EMAIL: self.email_enabled,
            NotificationChannel.SMS: self.sms_enabled,
            NotificationChannel.PUSH: self.push_enabled,
            NotificationChannel.IN_APP: self.in_app_enabled,
        }[channel]

    def event_enabled(self, event: NotificationEvent, channel: NotificationChannel) -> bool:
        """Per-event switch; defaults to enabled when no override exists."""
        return self.events.get(event, {}).get(channel, True)


@dataclass(frozen=True)
class SmtpSettings:
    host: str = "smtp.gmail.com"
    port: int = 587
    username: str | None = None
    password: str | None = None
    use_tls: bool = True
    from_email: str = "noreply@shreeom.com"


@dataclass(frozen=True)
class SmsGatewaySettings:
    url: str | None = None
    auth_key: str | None = None
    default_from: str | None = None


@dataclass(frozen=True)
class PushSettings:
    project_id: str | None = None
    access_token: str | None = None


@dataclass(frozen=True)
class DispatcherConfig:
    """Complete configuration for ``build_notification_service``."""

    mode: DeploymentMode = DeploymentMode.SIMULATED
    channels: ChannelSettings = field(default_factory=ChannelSettings)
    smtp: SmtpSettings = field(default_factory=SmtpSettings)
    sms_gateway: SmsGatewaySettings = field(default_factory=SmsGatewaySettings)
    push: PushSettings = field(default_factory=PushSettings)
    max_logs: int = MAX_LOGS
    provider_timeout: float = DEFAULT_PROVIDER_TIMEOUT

    def __post_init__(self) -> None:
        if self.max_logs < 1:
            raise ValueError("max_logs must be at least 1")
        if self.provider_timeout <= 0:
            raise ValueError("provider_timeout must be positive")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DispatcherConfig:
        """Read configuration from environment variables (once, at startup)."""
        env = os.environ if environ is None else environ

        def enabled(name: str) -> bool:
            return env.get(name, "true").strip().lower() != "false"

        return cls(
            mode=DeploymentMode(env.get("NOTIFY_MODE", DeploymentMode.SIMULATED.value).lower()),
            channels=ChannelSettings(
                email_enabled=enabled("EMAIL_ENABLED"),
                sms_enabled=enabled("SMS_ENABLED"),
                push_enabled=enabled("PUSH_ENABLED"),
                in_app_enabled=enabled("IN_APP_ENABLED"),
            ),
            smtp=SmtpSettings(
                host=env.get("SMTP_HOST", "smtp.gmail.com"),
                port=int(env.get("SMTP_PORT", "587")),
                username=env.get("SMTP_USER"),
                password=env.get("SMTP_PASS"),
                from_email=env.get("SMTP_FROM", "noreply@shreeom.com"),
            ),
            sms_gateway=SmsGatewaySettings(
                url=env.get("SMS_GATEWAY_URL"),
                auth_key=env.get("SMS_AUTH_KEY"),
                default_from=env.get("SMS_FROM"),
            ),
            push=PushSettings(
                project_id=env.get("FCM_PROJECT_ID"),
                access_token=env.get("FCM_ACCESS_TOKEN"),
            ),
            max_logs=int(env.get("NOTIFY_MAX_LOGS", str(MAX_LOGS))),
            provider_timeout=float(
                env.get("NOTIFY_PROVIDER_TIMEOUT", str(DEFAULT_PROVIDER_TIMEOUT))
            ),
        )
