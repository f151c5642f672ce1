"""Template registry for event/channel lookup and rendering."""

from __future__ import annotations

import logging
from typing import Any

from ..delivery import NotificationChannel, NotificationEvent, RenderedNotification
from ..exceptions import TemplateNotFoundError
from .catalogue import EMAIL_TEMPLATES, PUSH_TEMPLATES, SMS_TEMPLATES
from .engine import ChannelTemplate, JinjaTemplateRenderer

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """
    Registry of channel templates keyed by (event, channel).

    Resolution is pure: rendering depends only on the template source and
    the variable bag passed in.
    """

    def __init__(
        self,
        renderer: JinjaTemplateRenderer | None = None,
        *,
        include_defaults: bool = True,
    ) -> None:
        self._renderer = renderer or JinjaTemplateRenderer()
        self._templates: dict[tuple[NotificationEvent, NotificationChannel], ChannelTemplate] = {}
        if include_defaults:
            for channel, catalogue in (
                (NotificationChannel.EMAIL, EMAIL_TEMPLATES),
                (NotificationChannel.SMS, SMS_TEMPLATES),
                (NotificationChannel.PUSH, PUSH_TEMPLATES),
            ):
                for event, template in catalogue.items():
                    self.register(event, channel, template)

    def register(
        self,
        event: NotificationEvent,
        channel: NotificationChannel,
        template: ChannelTemplate,
    ) -> None:
        """Register (or replace) the template for an event/channel pair."""
        self._templates[(event, channel)] = template

    def get(
        self, event: NotificationEvent, channel: NotificationChannel
    ) -> ChannelTemplate | None:
        return self._templates.get((event, channel))

    def has(self, event: NotificationEvent, channel: NotificationChannel) -> bool:
        return (event, channel) in self._templates

    def resolve(
        self,
        event: NotificationEvent,
        channel: NotificationChannel,
        variables: dict[str, Any],
    ) -> RenderedNotification:
        """Render the template for (event, channel) with ``variables``."""
        template = self.get(event, channel)
        if template is None:
            logger.warning(f"No template registered for {event.value} on {channel.value}")
            raise TemplateNotFoundError(event.value, channel.value)
        return self._renderer.render(template, variables)
