"""Delivery types: channel/event enums, results and log entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


class NotificationChannel(str, Enum):
    """Supported notification channels."""

    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"
    IN_APP = "in_app"

    @property
    def label(self) -> str:
        return CHANNEL_LABELS[self.value]


CHANNEL_LABELS: dict[str, str] = {
    "email": "Email",
    "sms": "SMS",
    "push": "Push",
    "in_app": "In-app",
}


class NotificationEvent(str, Enum):
    """Business occurrences that trigger a notification."""

    # Auth
    USER_REGISTERED = "user_registered"
    OTP_SENT = "otp_sent"
    OTP_VERIFIED = "otp_verified"
    PASSWORD_RESET_REQUESTED = "password_reset_requested"
    PASSWORD_RESET_SUCCESS = "password_reset_success"

    # Contact & enquiry
    CONTACT_US_SUBMITTED = "contact_us_submitted"
    ENQUIRY_SENT = "enquiry_sent"
    ENQUIRY_RESPONSE = "enquiry_response"

    # Admin
    ADMIN_MESSAGE = "admin_message"
    PARTNER_APPROVED = "partner_approved"
    PARTNER_REJECTED = "partner_rejected"
    DEALER_APPROVED = "dealer_approved"
    DEALER_REJECTED = "dealer_rejected"

    # Payment
    PAYMENT_SUCCESS = "payment_success"
    PAYMENT_FAILED = "payment_failed"
    PAYMENT_PENDING = "payment_pending"

    # General
    SYSTEM_UPDATE = "system_update"
    PROMOTIONAL = "promotional"


class NotificationPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class DeliveryStatus(str, Enum):
    """Status recorded on a log entry."""

    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"
    DELIVERED = "delivered"


@dataclass(frozen=True)
class RenderedNotification:
    """Immutable rendered content ready for a provider.

    Email uses ``subject``/``body_text``/``body_html``, push uses
    ``title``/``body_text`` and SMS only ``body_text``.
    """

    body_text: str
    subject: str | None = None
    body_html: str | None = None
    title: str | None = None


@dataclass(frozen=True)
class NotificationResult:
    """Outcome of one delivery attempt on one channel.

    ``message_id`` is set only on success and ``error`` only on failure.
    """

    success: bool
    channel: NotificationChannel
    message_id: str | None = None
    error: str | None = None
    timestamp: datetime | None = None

    def __post_init__(self) -> None:
        if self.timestamp is None:
            object.__setattr__(self, "timestamp", datetime.now(timezone.utc))

    @classmethod
    def sent(cls, channel: NotificationChannel, message_id: str) -> NotificationResult:
        """Create a successful result."""
        return cls(success=True, channel=channel, message_id=message_id)

    @classmethod
    def failed(cls, channel: NotificationChannel, error: str) -> NotificationResult:
        """Create a failed result."""
        return cls(success=False, channel=channel, error=error)


@dataclass(frozen=True)
class RedactedRecipient:
    """Log-safe projection of a recipient: email and phone are masked."""

    user_id: str | None = None
    email: str | None = None
    phone: str | None = None
    role: str | None = None


@dataclass(frozen=True)
class NotificationLog:
    """Immutable record of a single (request, channel) delivery attempt."""

    id: str
    event: NotificationEvent
    channel: NotificationChannel
    recipient: RedactedRecipient
    status: DeliveryStatus
    result: NotificationResult
    created_at: datetime
    sent_at: datetime | None = None
    error: str | None = None
    priority: NotificationPriority = NotificationPriority.NORMAL
    correlation_id: str | None = None
