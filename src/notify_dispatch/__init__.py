"""Multi-channel notification dispatch with a redacted, bounded audit log."""

from __future__ import annotations

from .config import (
    MAX_LOGS,
    ChannelSettings,
    DeploymentMode,
    DispatcherConfig,
    PushSettings,
    SmsGatewaySettings,
    SmtpSettings,
)
from .correlation import correlation_scope, get_correlation_id, set_correlation_id
from .delivery import (
    DeliveryStatus,
    NotificationChannel,
    NotificationEvent,
    NotificationLog,
    NotificationPriority,
    NotificationResult,
    RedactedRecipient,
    RenderedNotification,
)
from .exceptions import (
    ChannelDisabledError,
    NotificationDeliveryError,
    NotificationError,
    NotifyDispatchError,
    ProviderNotRegisteredError,
    RecipientValidationError,
    TemplateNotFoundError,
)
from .log_store import InMemoryNotificationLog, LogFilters, LogPage, LogStats

# Memory transports for testing and simulated deployments
from .memory import InMemoryTransport, LoggingTransport
from .payload import NotificationPayload, NotificationRecipient, NotificationTemplate
from .ports import IChannelProvider, INotificationLogStore, ITemplateResolver, ITransport
from .providers import (
    EmailProvider,
    FcmPushTransport,
    HttpSmsGateway,
    InAppProvider,
    PushProvider,
    SmsProvider,
    SmtpEmailTransport,
)
from .redaction import MetadataSanitizer, mask_address, mask_pii, mask_token, redact_text
from .service import NotificationService, build_notification_service
from .template import ChannelTemplate, JinjaTemplateRenderer, TemplateRegistry

__all__ = [
    "MAX_LOGS",
    "ChannelDisabledError",
    "ChannelSettings",
    "ChannelTemplate",
    "DeliveryStatus",
    "DeploymentMode",
    "DispatcherConfig",
    "EmailProvider",
    "FcmPushTransport",
    "HttpSmsGateway",
    "IChannelProvider",
    "INotificationLogStore",
    "ITemplateResolver",
    "ITransport",
    "InAppProvider",
    "InMemoryNotificationLog",
    "InMemoryTransport",
    "JinjaTemplateRenderer",
    "LogFilters",
    "LogPage",
    "LogStats",
    "LoggingTransport",
    "MetadataSanitizer",
    "NotificationChannel",
    "NotificationDeliveryError",
    "NotificationError",
    "NotificationEvent",
    "NotificationLog",
    "NotificationPayload",
    "NotificationPriority",
    "NotificationRecipient",
    "NotificationResult",
    "NotificationService",
    "NotificationTemplate",
    "NotifyDispatchError",
    "ProviderNotRegisteredError",
    "PushProvider",
    "PushSettings",
    "RecipientValidationError",
    "RedactedRecipient",
    "RenderedNotification",
    "SmsGatewaySettings",
    "SmsProvider",
    "SmtpEmailTransport",
    "SmtpSettings",
    "TemplateNotFoundError",
    "TemplateRegistry",
    "build_notification_service",
    "correlation_scope",
    "get_correlation_id",
    "mask_address",
    "mask_pii",
    "mask_token",
    "redact_text",
    "set_correlation_id",
]
