"""Template resolver port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..delivery import NotificationChannel, NotificationEvent, RenderedNotification


@runtime_checkable
class ITemplateResolver(Protocol):
    """Maps (event, channel) to rendered content."""

    def resolve(
        self,
        event: NotificationEvent,
        channel: NotificationChannel,
        variables: dict[str, Any],
    ) -> RenderedNotification:
        """Render the registered template; raises ``TemplateNotFoundError``."""
        ...
