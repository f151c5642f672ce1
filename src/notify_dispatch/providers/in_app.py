"""In-app provider: nothing leaves the process."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Any

from ..config import DeploymentMode
from ..delivery import NotificationChannel, NotificationResult, RenderedNotification
from ..ports.provider import IChannelProvider

if TYPE_CHECKING:
    from ..payload import NotificationRecipient

logger = logging.getLogger(__name__)


class InAppProvider(IChannelProvider):
    """
    Degenerate provider for the in-app inbox.

    Storage of the message for later retrieval belongs to the inbox, so a
    send succeeds immediately with a locally generated id. The only
    precondition is the channel switch.
    """

    channel = NotificationChannel.IN_APP

    def __init__(
        self, *, enabled: bool = True, mode: DeploymentMode = DeploymentMode.SIMULATED
    ) -> None:
        self.enabled = enabled
        self.mode = mode

    async def send(
        self,
        recipient: NotificationRecipient,
        content: RenderedNotification,
        metadata: dict[str, Any] | None = None,
    ) -> NotificationResult:
        if not self.enabled:
            return NotificationResult.failed(self.channel, "In-app notifications are disabled")
        message_id = f"inapp-{uuid.uuid4().hex[:12]}"
        logger.debug(f"In-app notification queued for user {recipient.user_id} ({message_id})")
        return NotificationResult.sent(self.channel, message_id)
