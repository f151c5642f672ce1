"""Channel provider port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..delivery import NotificationChannel, NotificationResult, RenderedNotification
    from ..payload import NotificationRecipient


@runtime_checkable
class IChannelProvider(Protocol):
    """
    Delivers rendered content to one recipient over a single channel.

    Exactly one attempt per call and exactly one result out: providers never
    retry and never raise for validation or transport failures.
    """

    channel: NotificationChannel

    async def send(
        self,
        recipient: NotificationRecipient,
        content: RenderedNotification,
        metadata: dict[str, Any] | None = None,
    ) -> NotificationResult:
        """Validate preconditions, transmit and report the outcome."""
        ...
