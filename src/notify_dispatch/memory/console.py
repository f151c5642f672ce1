"""Simulated transport: logs the message instead of transmitting it."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from ..delivery import NotificationChannel, NotificationEvent, RenderedNotification
from ..ports.transport import ITransport
from ..redaction import mask_address, mask_token, redact_text

logger = logging.getLogger(__name__)

# Bodies of these events carry a one-time code.
SECRET_BODY_EVENTS: frozenset[str] = frozenset(
    {
        NotificationEvent.OTP_SENT.value,
        NotificationEvent.PASSWORD_RESET_REQUESTED.value,
    }
)


class LoggingTransport(ITransport):
    """
    Transport used in simulated deployments.

    Performs no I/O; logs a masked summary and returns a ``test-`` id.
    The body preview is omitted for events whose body carries a secret.
    """

    def __init__(self, channel: NotificationChannel, preview_length: int = 50):
        self.channel = channel
        self.preview_length = preview_length

    def preview(self, content: RenderedNotification, metadata: dict[str, Any] | None) -> str:
        if (metadata or {}).get("event") in SECRET_BODY_EVENTS:
            return "<redacted>"
        return repr(redact_text(content.body_text[: self.preview_length]))

    async def transmit(
        self,
        address: str,
        content: RenderedNotification,
        metadata: dict[str, Any] | None = None,
    ) -> str:
        masked = (
            mask_token(address)
            if self.channel == NotificationChannel.PUSH
            else mask_address(address)
        )
        logger.info(
            f"[SIMULATED {self.channel.value.upper()}] to={masked} "
            f"subject={content.subject or content.title or '(none)'} "
            f"preview={self.preview(content, metadata)} "
            f"length={len(content.body_text)}"
        )
        return f"test-{self.channel.value.replace('_', '')}-{uuid.uuid4().hex[:12]}"
