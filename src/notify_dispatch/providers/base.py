"""Shared precondition and delivery flow for channel providers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from ..config import DeploymentMode
from ..delivery import NotificationChannel, NotificationResult, RenderedNotification
from ..memory.console import LoggingTransport
from ..ports.provider import IChannelProvider
from ..redaction import mask_address, redact_text

if TYPE_CHECKING:
    from ..payload import NotificationRecipient
    from ..ports.transport import ITransport

logger = logging.getLogger(__name__)


class BaseChannelProvider(IChannelProvider):
    """
    Template method for providers.

    Checks run in order and each short-circuits without touching the
    transport: channel disabled, recipient address missing, content
    constraint violated. Only then is the transport called, once.
    """

    channel: ClassVar[NotificationChannel]
    missing_address_error: ClassVar[str]

    def __init__(
        self,
        *,
        enabled: bool = True,
        mode: DeploymentMode = DeploymentMode.SIMULATED,
        transport: ITransport | None = None,
    ) -> None:
        if transport is None:
            if mode == DeploymentMode.LIVE:
                raise ValueError(
                    f"{type(self).__name__} requires a transport in live mode"
                )
            transport = LoggingTransport(self.channel)
        self.enabled = enabled
        self.mode = mode
        self.transport = transport

    def address_of(self, recipient: NotificationRecipient) -> str | None:
        """Return the recipient field this channel delivers to."""
        raise NotImplementedError

    def validate_content(self, content: RenderedNotification) -> str | None:
        """Return an error message if content violates a channel constraint."""
        return None

    async def send(
        self,
        recipient: NotificationRecipient,
        content: RenderedNotification,
        metadata: dict[str, Any] | None = None,
    ) -> NotificationResult:
        if not self.enabled:
            return NotificationResult.failed(
                self.channel, f"{self.channel.label} notifications are disabled"
            )

        address = self.address_of(recipient)
        if not address:
            return NotificationResult.failed(self.channel, self.missing_address_error)

        violation = self.validate_content(content)
        if violation:
            return NotificationResult.failed(self.channel, violation)

        try:
            message_id = await self.transport.transmit(address, content, metadata)
        except Exception as e:
            reason = str(e) or type(e).__name__
            logger.warning(
                f"Failed to send {self.channel.value} to {self._masked(address)}: "
                f"{redact_text(reason)}"
            )
            return NotificationResult.failed(self.channel, reason)

        logger.info(f"{self.channel.label} sent to {self._masked(address)} (id: {message_id})")
        return NotificationResult.sent(self.channel, message_id)

    def _masked(self, address: str) -> str | None:
        return mask_address(address)
