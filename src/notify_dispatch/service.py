"""Notification service: fans a request out over channels and logs every attempt."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from .config import DEFAULT_PROVIDER_TIMEOUT, ChannelSettings, DeploymentMode, DispatcherConfig
from .correlation import correlation_scope, get_correlation_id
from .delivery import (
    DeliveryStatus,
    NotificationChannel,
    NotificationLog,
    NotificationResult,
    RenderedNotification,
)
from .exceptions import (
    ChannelDisabledError,
    NotificationError,
    ProviderNotRegisteredError,
    RecipientValidationError,
)
from .log_store import InMemoryNotificationLog, LogFilters, LogPage
from .payload import NotificationPayload
from .ports.log_store import INotificationLogStore
from .ports.provider import IChannelProvider
from .ports.resolver import ITemplateResolver
from .providers import (
    EmailProvider,
    FcmPushTransport,
    HttpSmsGateway,
    InAppProvider,
    PushProvider,
    SmsProvider,
    SmtpEmailTransport,
)
from .redaction import MetadataSanitizer, default_sanitizer, redact_recipient, redact_text
from .template.registry import TemplateRegistry

logger = logging.getLogger(__name__)

# Checked by the dispatcher before template resolution.
_REQUIRED_FIELDS: dict[NotificationChannel, tuple[str, str]] = {
    NotificationChannel.EMAIL: ("email", "Email address required for email notification"),
    NotificationChannel.SMS: ("phone", "Phone number required for SMS notification"),
    NotificationChannel.PUSH: ("push_token", "Push token required for push notification"),
}


class NotificationService:
    """
    Orchestrates multi-channel delivery.

    For each requested channel, independently and concurrently: validate
    the recipient, materialize content, call the provider under a timeout,
    and append one redacted log entry. Every failure becomes a failed
    ``NotificationResult``; nothing is raised to the caller.
    """

    def __init__(
        self,
        providers: Mapping[NotificationChannel, IChannelProvider],
        *,
        resolver: ITemplateResolver | None = None,
        log_store: INotificationLogStore | None = None,
        channel_settings: ChannelSettings | None = None,
        provider_timeout: float = DEFAULT_PROVIDER_TIMEOUT,
        sanitizer: MetadataSanitizer | None = None,
    ) -> None:
        self.providers = dict(providers)
        self.resolver = resolver or TemplateRegistry()
        self.log_store = log_store or InMemoryNotificationLog()
        self.channel_settings = channel_settings or ChannelSettings()
        self.provider_timeout = provider_timeout
        self.sanitizer = sanitizer or default_sanitizer

    async def send(self, payload: NotificationPayload) -> list[NotificationResult]:
        """Send ``payload`` on every requested channel.

        Results come back in the requested channel order, one per channel.
        """
        with correlation_scope():
            metadata = self.sanitizer.sanitize(
                {
                    **payload.metadata,
                    "event": payload.event.value,
                    "priority": payload.priority.value,
                }
            )
            tasks = [
                self._dispatch_channel(payload, channel, metadata) for channel in payload.channel
            ]
            # gather preserves argument order regardless of completion order
            results = await asyncio.gather(*tasks)

        succeeded = sum(1 for r in results if r.success)
        logger.info(
            f"Dispatched {payload.event.value} on {len(results)} channel(s): "
            f"{succeeded} sent, {len(results) - succeeded} failed"
        )
        return list(results)

    async def _dispatch_channel(
        self,
        payload: NotificationPayload,
        channel: NotificationChannel,
        metadata: dict[str, Any],
    ) -> NotificationResult:
        try:
            result = await asyncio.wait_for(
                self._send_to_channel(payload, channel, metadata),
                timeout=self.provider_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"{channel.value} provider timed out after {self.provider_timeout}s")
            result = NotificationResult.failed(
                channel, f"{channel.value} provider timed out after {self.provider_timeout}s"
            )
        except NotificationError as e:
            logger.warning(
                f"{channel.value} notification for {payload.event.value} rejected: "
                f"{redact_text(str(e))}"
            )
            result = NotificationResult.failed(channel, str(e))
        except Exception as e:
            logger.error(
                f"Failed to dispatch {channel.value} notification for "
                f"{payload.event.value}: {redact_text(str(e))}",
                exc_info=True,
            )
            result = NotificationResult.failed(channel, str(e) or type(e).__name__)

        await self._log(payload, channel, result)
        return result

    async def _send_to_channel(
        self,
        payload: NotificationPayload,
        channel: NotificationChannel,
        metadata: dict[str, Any],
    ) -> NotificationResult:
        provider = self.providers.get(channel)
        if provider is None:
            raise ProviderNotRegisteredError(channel.value)

        if not self.channel_settings.event_enabled(payload.event, channel):
            raise ChannelDisabledError(channel.value, payload.event.value)

        required = _REQUIRED_FIELDS.get(channel)
        if required is not None and not getattr(payload.recipient, required[0]):
            raise RecipientValidationError(channel.value, required[1])

        content = self._materialize(payload, channel)
        return await provider.send(payload.recipient, content, metadata)

    def _materialize(
        self, payload: NotificationPayload, channel: NotificationChannel
    ) -> RenderedNotification:
        template = payload.template
        if channel in (NotificationChannel.EMAIL, NotificationChannel.SMS):
            return self.resolver.resolve(payload.event, channel, payload.template_variables())
        # Push and in-app use the caller's title/message verbatim.
        return RenderedNotification(
            title=template.title,
            body_text=template.message,
            subject=template.subject,
        )

    async def _log(
        self,
        payload: NotificationPayload,
        channel: NotificationChannel,
        result: NotificationResult,
    ) -> None:
        logged_result = (
            dataclasses.replace(result, error=redact_text(result.error)) if result.error else result
        )
        entry = NotificationLog(
            id=f"log-{uuid.uuid4().hex}",
            event=payload.event,
            channel=channel,
            recipient=redact_recipient(payload.recipient),
            status=DeliveryStatus.SENT if result.success else DeliveryStatus.FAILED,
            result=logged_result,
            created_at=datetime.now(timezone.utc),
            sent_at=result.timestamp if result.success else None,
            error=logged_result.error,
            priority=payload.priority,
            correlation_id=get_correlation_id(),
        )
        await self.log_store.append(entry)

    async def get_logs(self, filters: LogFilters | None = None) -> list[NotificationLog]:
        """Query the log, newest first."""
        return await self.log_store.query(filters)

    async def get_logs_page(self, filters: LogFilters | None = None) -> LogPage:
        return await self.log_store.query_page(filters)


def build_notification_service(config: DispatcherConfig | None = None) -> NotificationService:
    """Construct a service with one provider per channel from ``config``."""
    config = config or DispatcherConfig()
    channels = config.channels
    live = config.mode == DeploymentMode.LIVE

    email_transport = sms_transport = push_transport = None
    if live:
        email_transport = SmtpEmailTransport(
            host=config.smtp.host,
            port=config.smtp.port,
            username=config.smtp.username,
            password=config.smtp.password,
            use_tls=config.smtp.use_tls,
            timeout=config.provider_timeout,
            from_email=config.smtp.from_email,
        )
        if not (config.sms_gateway.url and config.sms_gateway.auth_key):
            raise ValueError("Live mode requires SMS gateway url and auth key")
        sms_transport = HttpSmsGateway(
            url=config.sms_gateway.url,
            auth_key=config.sms_gateway.auth_key,
            default_from=config.sms_gateway.default_from,
            timeout=config.provider_timeout,
        )
        if not (config.push.project_id and config.push.access_token):
            raise ValueError("Live mode requires FCM project id and access token")
        push_transport = FcmPushTransport(
            project_id=config.push.project_id,
            access_token=config.push.access_token,
            timeout=config.provider_timeout,
        )

    transports = {
        NotificationChannel.EMAIL: (EmailProvider, email_transport),
        NotificationChannel.SMS: (SmsProvider, sms_transport),
        NotificationChannel.PUSH: (PushProvider, push_transport),
    }
    providers: dict[NotificationChannel, IChannelProvider] = {
        channel: provider_cls(
            enabled=channels.channel_enabled(channel), mode=config.mode, transport=transport
        )
        for channel, (provider_cls, transport) in transports.items()
    }
    providers[NotificationChannel.IN_APP] = InAppProvider(
        enabled=channels.channel_enabled(NotificationChannel.IN_APP), mode=config.mode
    )
    logger.info(f"Notification service configured in {config.mode.value} mode")
    return NotificationService(
        providers,
        log_store=InMemoryNotificationLog(config.max_logs),
        channel_settings=channels,
        provider_timeout=config.provider_timeout,
    )
