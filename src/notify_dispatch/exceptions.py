"""Exception hierarchy for notification dispatch."""

from __future__ import annotations

from .delivery import CHANNEL_LABELS


class NotifyDispatchError(Exception):
    """Root exception for the notify-dispatch package."""


class NotificationError(NotifyDispatchError):
    """Base exception for channel-local notification failures."""


class TemplateNotFoundError(NotificationError):
    """Raised when no template is registered for an event/channel pair."""

    def __init__(self, event: str, channel: str):
        self.event = event
        self.channel = channel
        super().__init__(f"No {channel} template found for event: {event}")


class RecipientValidationError(NotificationError):
    """Raised when a recipient lacks the field a channel needs."""

    def __init__(self, channel: str, reason: str):
        self.channel = channel
        self.reason = reason
        super().__init__(reason)


class ProviderNotRegisteredError(NotificationError):
    """Raised when no provider is registered for a requested channel."""

    def __init__(self, channel: str):
        self.channel = channel
        super().__init__(f"No provider registered for channel: {channel}")


class ChannelDisabledError(NotificationError):
    """Raised when a channel is switched off for a specific event."""

    def __init__(self, channel: str, event: str):
        self.channel = channel
        self.event = event
        label = CHANNEL_LABELS.get(channel, channel)
        super().__init__(f"{label} notifications are disabled for event {event}")


class NotificationDeliveryError(NotificationError):
    """Raised by transports when delivery fails (network, provider error, etc.)."""

    def __init__(self, channel: str, recipient: str, reason: str):
        self.channel = channel
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"Failed to deliver via {channel} to {recipient}: {reason}")
